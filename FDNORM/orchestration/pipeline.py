"""Sequential analysis pipeline: phase 1 (input) -> phase 2 (keys) -> phase 3 (decomposition)."""

from typing import Iterable, Optional, Union

from FDNORM.utils.logging import get_logger
from FDNORM.config import AnalysisSettings, get_analysis_settings
from FDNORM.ir.models import AnalysisResult
from FDNORM.phases.phase1 import (
    step_1_1_ddl_parsing,
    step_1_2_fd_parsing,
    step_1_3_fd_validation,
    split_outcomes,
)
from FDNORM.phases.phase2 import (
    prime_attributes,
    step_2_1_candidate_key_enumeration,
    step_2_2_primary_key_assessment,
)
from FDNORM.phases.phase3 import step_3_1_3nf_decomposition, step_3_2_ddl_compilation
from FDNORM.utils.error_handling import StepError
from FDNORM.utils.fd import AttributeIndex

logger = get_logger(__name__)


def run_analysis(
    ddl_text: str,
    fd_text: Union[str, Iterable[str]],
    settings: Optional[AnalysisSettings] = None,
) -> AnalysisResult:
    """
    Run the full analysis for one table.

    Args:
        ddl_text: CREATE TABLE text
        fd_text: FD lines (`A,B->C`), optionally terminated by END
        settings: Analysis settings; loaded from config.yaml when omitted

    Returns:
        AnalysisResult

    Raises:
        DDLParseError: If the DDL has no column list
        AttributeLimitExceededError: If the universe is too large to enumerate
        NoCandidateKeyError: If the universe is empty
    """
    settings = settings or get_analysis_settings()
    logger.info("=" * 60)
    logger.info("FDNORM analysis started")

    # Phase 1
    ddl = step_1_1_ddl_parsing(ddl_text)

    try:
        outcomes = step_1_3_fd_validation(step_1_2_fd_parsing(fd_text), ddl.attributes)
        fds, rejected = split_outcomes(outcomes)

        # Phase 2
        keys = step_2_1_candidate_key_enumeration(ddl.attributes, fds, settings)
        assessment = step_2_2_primary_key_assessment(ddl.primary_key, ddl.attributes, fds, keys)

        # Phase 3
        relations = step_3_1_3nf_decomposition(fds, keys, ddl.attributes)
        statements = step_3_2_ddl_compilation(relations, settings.column_type)
    except StepError as e:
        if e.context.table_name is None:
            e.context.table_name = ddl.table_name
        raise

    index = AttributeIndex(ddl.attributes)
    result = AnalysisResult(
        ddl=ddl,
        functional_dependencies=fds,
        rejected_dependencies=rejected,
        candidate_keys=[index.ordered(k) for k in keys],
        prime_attributes=index.ordered(prime_attributes(keys)),
        primary_key_assessment=assessment,
        relations=relations,
        ddl_statements=statements,
    )

    logger.info(
        f"FDNORM analysis completed: {len(keys)} candidate key(s), "
        f"{len(relations)} relation(s), {len(rejected)} rejected FD line(s)"
    )
    logger.info("=" * 60)
    return result
