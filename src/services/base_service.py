"""
Base service layer: the result type every store operation returns
"""

import logging
from typing import Dict, Any, List, Optional
from dataclasses import dataclass

logger = logging.getLogger(__name__)

RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
DATABASE_ERROR = "DATABASE_ERROR"
EXECUTION_ERROR = "EXECUTION_ERROR"

@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None

    @classmethod
    def ok(cls, records: List[Dict[str, Any]]) -> "ServiceResult":
        return cls(success=True, data=records, count=len(records))

    @classmethod
    def failure(cls, error: str, error_type: str = EXECUTION_ERROR) -> "ServiceResult":
        return cls(success=False, error=error, error_type=error_type)

    @property
    def is_not_found(self) -> bool:
        return not self.success and self.error_type == RESOURCE_NOT_FOUND
