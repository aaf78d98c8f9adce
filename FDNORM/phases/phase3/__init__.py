"""Phase 3: Decomposition & DDL."""

from .step_3_1_3nf_decomposition import (
    decompose,
    group_fd_attribute_sets,
    step_3_1_3nf_decomposition,
)
from .step_3_2_ddl_compilation import (
    DEFAULT_COLUMN_TYPE,
    compile_relation,
    step_3_2_ddl_compilation,
)

__all__ = [
    "decompose",
    "group_fd_attribute_sets",
    "step_3_1_3nf_decomposition",
    "DEFAULT_COLUMN_TYPE",
    "compile_relation",
    "step_3_2_ddl_compilation",
]
