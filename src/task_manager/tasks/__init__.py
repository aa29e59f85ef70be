"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFields, TaskRow)
- task_builder.py: construction of new tasks from raw field values
- task_registry.py: in-memory ordered collection (add/remove/list)
- task_sorting.py: sort keys and pure sorting functions
- task_validation.py: report-only field presence chain
- task_api.py: small high-level helpers used by the console front end
"""
