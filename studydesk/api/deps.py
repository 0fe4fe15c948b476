"""
FastAPI dependencies that hand out the workspace stores.

The workspace is built once (in the lifespan, or by the caller of create_app)
and kept on app.state. Routes never look stores up globally; they receive them
through these dependencies.

All handlers are ``async def`` so every store call runs on the event loop
thread, one mutation at a time.
"""

from typing import Annotated

from fastapi import Depends, Request

from studydesk.services.stores import AssignmentStore, NoteStore, ResourceStore, SubjectStore
from studydesk.services.workspace import Workspace


def get_workspace(request: Request) -> Workspace:
    """The workspace opened for this application."""
    return request.app.state.workspace


def get_assignments(workspace: Annotated[Workspace, Depends(get_workspace)]) -> AssignmentStore:
    return workspace.assignments


def get_subjects(workspace: Annotated[Workspace, Depends(get_workspace)]) -> SubjectStore:
    return workspace.subjects


def get_notes(workspace: Annotated[Workspace, Depends(get_workspace)]) -> NoteStore:
    return workspace.notes


def get_resources(workspace: Annotated[Workspace, Depends(get_workspace)]) -> ResourceStore:
    return workspace.resources


# Type aliases for dependency injection
Assignments = Annotated[AssignmentStore, Depends(get_assignments)]
Subjects = Annotated[SubjectStore, Depends(get_subjects)]
Notes = Annotated[NoteStore, Depends(get_notes)]
Resources = Annotated[ResourceStore, Depends(get_resources)]
