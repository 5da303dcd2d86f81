"""
Task subsystem.

Components:
- task_models.py: data structure (Task)
- task_store.py: in-memory ordered list addressed by position
- dates.py: date validation + date prompt
- persistence.py: quoted-field save file (load/save)
- operations.py: add/view/mark/edit/delete as used by the menu
"""
