from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from gedcom_tree.config import GTConfig

if TYPE_CHECKING:
    from gedcom_tree.linking.linker import SkippedReference


@dataclass
class ParseContext:
    """
    State for one pipeline run over a single GEDCOM file.

    ``Pipeline.run`` fills ``stats`` with record and edge counts and
    ``errors`` with the family members the linker had to skip.
    """

    config: GTConfig
    logger: logging.Logger

    input_path: Optional[str] = None
    output_path: Optional[str] = None

    # None defers to ``parser.strict_levels`` in the config
    strict_levels: Optional[bool] = None

    stats: Dict[str, int] = field(default_factory=dict)
    errors: List[SkippedReference] = field(default_factory=list)

    def resolve_strict_levels(self) -> bool:
        if self.strict_levels is not None:
            return self.strict_levels
        return bool(self.config.parser.get("strict_levels", True))
