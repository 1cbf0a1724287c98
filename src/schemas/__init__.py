"""Schema package for external and internal contracts."""

from .requests import ContractInput, QueryRequest
from .responses import AnalysisRunResult, AnalyzeResponse, QueryResponse

__all__ = [
    "AnalysisRunResult",
    "AnalyzeResponse",
    "ContractInput",
    "QueryRequest",
    "QueryResponse",
]
