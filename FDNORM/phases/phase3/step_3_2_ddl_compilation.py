"""Phase 3, Step 3.2: DDL Compilation.

Render decomposed relations as CREATE TABLE statements.
"""

from typing import List, Sequence

from FDNORM.utils.logging import get_logger
from FDNORM.ir.models import Relation

logger = get_logger(__name__)

DEFAULT_COLUMN_TYPE = "VARCHAR(255)"


def compile_relation(relation: Relation, column_type: str = DEFAULT_COLUMN_TYPE) -> str:
    """
    Render one relation.

    Example:
        >>> print(compile_relation(Relation(name="R1", attributes=["A"], primary_key=["A"])))
        CREATE TABLE R1 (
            A VARCHAR(255),
            PRIMARY KEY (A)
        );
    """
    lines = [f"CREATE TABLE {relation.name} ("]
    column_defs = [f"    {attr} {column_type}" for attr in relation.attributes]
    if relation.primary_key:
        column_defs.append(f"    PRIMARY KEY ({', '.join(relation.primary_key)})")
    lines.append(",\n".join(column_defs))
    lines.append(");")
    return "\n".join(lines)


def step_3_2_ddl_compilation(
    relations: Sequence[Relation],
    column_type: str = DEFAULT_COLUMN_TYPE,
) -> List[str]:
    """
    Step 3.2 (deterministic): Generate one CREATE TABLE statement per relation.

    Args:
        relations: Output of Step 3.1
        column_type: SQL type used for every column

    Returns:
        List of DDL statements, same order as relations
    """
    logger.info("Starting Step 3.2: DDL Compilation (deterministic)")

    if not relations:
        logger.warning("No relations to compile")
        return []

    statements = [compile_relation(r, column_type) for r in relations]
    logger.info(f"DDL compilation completed: {len(statements)} statement(s)")
    return statements
