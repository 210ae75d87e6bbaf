"""
Core logic for deptboard.

The core is environment independent:
- api/ - async REST client for users, tasks and comments
- store.py - the in-memory snapshot of server data
- views/ - pure view-model builders, one per page
- router.py - page routing and render dispatch
- forms/ - form controllers for creating, editing and deleting records
- app.py - wiring of the above
"""

__all__: list[str] = []
