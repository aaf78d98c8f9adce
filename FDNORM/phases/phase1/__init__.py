"""Phase 1: Schema & Dependency Input."""

from .step_1_1_ddl_parsing import step_1_1_ddl_parsing
from .step_1_2_fd_parsing import step_1_2_fd_parsing, parse_fd_line, END_MARKER
from .step_1_3_fd_validation import step_1_3_fd_validation, validate_fd, split_outcomes

__all__ = [
    "step_1_1_ddl_parsing",
    "step_1_2_fd_parsing",
    "parse_fd_line",
    "END_MARKER",
    "step_1_3_fd_validation",
    "validate_fd",
    "split_outcomes",
]
