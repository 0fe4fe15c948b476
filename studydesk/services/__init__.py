"""Core services: persistence, GPA engine, search and the entity stores.

Submodules are imported directly (``from studydesk.services.gpa import ...``);
this package does not re-export them.
"""
