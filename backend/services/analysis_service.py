"""Analysis service - runs FDNORM steps off the event loop."""

import asyncio
import logging
from typing import List, Optional, Sequence, Tuple

from backend.models.responses import (
    AnalysisRunResponse,
    CandidateKeysResponse,
    ClosureResponse,
)
from FDNORM.config import AnalysisSettings, get_analysis_settings
from FDNORM.ir.models import FunctionalDependency, RejectedFD
from FDNORM.orchestration import render_report, run_analysis
from FDNORM.phases.phase1 import split_outcomes, step_1_2_fd_parsing, step_1_3_fd_validation
from FDNORM.phases.phase2 import find_candidate_keys, ordered_universe, prime_attributes
from FDNORM.utils.fd import AttributeIndex, closure

logger = logging.getLogger(__name__)


class AnalysisService:
    """Deterministic FD analysis."""

    def __init__(self, settings: Optional[AnalysisSettings] = None):
        self._settings = settings

    @property
    def settings(self) -> AnalysisSettings:
        if self._settings is None:
            self._settings = get_analysis_settings()
        return self._settings

    def _parse_fds(
        self,
        fd_lines: Sequence[str],
        universe: Sequence[str],
    ) -> Tuple[List[FunctionalDependency], List[RejectedFD]]:
        outcomes = step_1_2_fd_parsing(list(fd_lines))
        return split_outcomes(step_1_3_fd_validation(outcomes, universe))

    async def run(self, ddl: str, fd_lines: Sequence[str]) -> AnalysisRunResponse:
        """Run the full pipeline."""
        result = await asyncio.to_thread(run_analysis, ddl, list(fd_lines), self.settings)
        return AnalysisRunResponse(status="success", result=result, report=render_report(result))

    async def closure(
        self,
        universe: Sequence[str],
        fd_lines: Sequence[str],
        attributes: Sequence[str],
    ) -> ClosureResponse:
        """Closure of `attributes` under the valid FDs."""
        order = ordered_universe(universe)
        fds, rejected = self._parse_fds(fd_lines, order)
        result = closure(attributes, fds)
        index = AttributeIndex(order)
        logger.debug(f"Closure of {list(attributes)}: {sorted(result)}")
        return ClosureResponse(
            attributes=index.ordered(set(attributes)),
            closure=index.ordered(result),
            is_superkey=bool(order) and set(order) <= result,
            rejected_dependencies=rejected,
        )

    async def candidate_keys(
        self,
        universe: Sequence[str],
        fd_lines: Sequence[str],
    ) -> CandidateKeysResponse:
        """Minimal candidate keys under the valid FDs."""
        order = ordered_universe(universe)
        fds, rejected = self._parse_fds(fd_lines, order)
        keys = await asyncio.to_thread(
            find_candidate_keys,
            order,
            fds,
            self.settings.max_attributes,
            self.settings.max_workers,
        )
        index = AttributeIndex(order)
        return CandidateKeysResponse(
            candidate_keys=[index.ordered(k) for k in keys],
            prime_attributes=index.ordered(prime_attributes(keys)),
            rejected_dependencies=rejected,
        )
