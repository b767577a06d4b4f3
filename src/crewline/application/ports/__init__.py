"""Application ports - interfaces for external adapters."""

from crewline.application.ports.permission_checker import PermissionChecker
from crewline.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
