from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class AnalysisContext:
    """
    Request handed to the pipeline: which file, which analyzer and
    (for the title analyzer) which configured title codes.
    """

    config: Any
    logger: Any

    input_path: Optional[str] = None
    analyzer: Optional[str] = None
    title_codes: List[str] = field(default_factory=list)

    stats: Dict[str, Any] = field(default_factory=dict)

    debug: bool = False
