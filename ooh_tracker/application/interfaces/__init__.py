"""
Application interfaces package.
"""

from .repositories import (
    CustomerRepositoryInterface,
    EngineerRepositoryInterface,
    JobRepositoryInterface,
)

__all__ = [
    "CustomerRepositoryInterface",
    "EngineerRepositoryInterface",
    "JobRepositoryInterface",
]
