"""Unit tests for Step 1.1: DDL Parsing."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from FDNORM.phases.phase1 import step_1_1_ddl_parsing
from FDNORM.utils.error_handling import DDLParseError


def test_table_level_primary_key():
    ddl = """
    CREATE TABLE Enrollment (
        StudentID INT,
        CourseID INT,
        Grade VARCHAR(2),
        Price DECIMAL(10,2),
        PRIMARY KEY (StudentID, CourseID)
    );
    """
    parsed = step_1_1_ddl_parsing(ddl)

    assert parsed.table_name == "Enrollment"
    assert parsed.attributes == ["StudentID", "CourseID", "Grade", "Price"]
    assert parsed.primary_key == ["StudentID", "CourseID"]
    assert parsed.universe == {"StudentID", "CourseID", "Grade", "Price"}


def test_inline_primary_key():
    parsed = step_1_1_ddl_parsing("CREATE TABLE t (id INT PRIMARY KEY, name TEXT NOT NULL)")
    assert parsed.attributes == ["id", "name"]
    assert parsed.primary_key == ["id"]


def test_lowercase_keywords():
    parsed = step_1_1_ddl_parsing("create table t (a int, b int, primary key (a))")
    assert parsed.attributes == ["a", "b"]
    assert parsed.primary_key == ["a"]


def test_constraint_clauses_are_not_columns():
    ddl = """
    CREATE TABLE Orders (
        OrderID INT,
        CustomerID INT,
        Code CHAR(4),
        CONSTRAINT pk_orders PRIMARY KEY (OrderID),
        FOREIGN KEY (CustomerID) REFERENCES Customer(CustomerID),
        UNIQUE (Code),
        CHECK (OrderID > 0)
    )
    """
    parsed = step_1_1_ddl_parsing(ddl)
    assert parsed.attributes == ["OrderID", "CustomerID", "Code"]
    assert parsed.primary_key == ["OrderID"]


def test_quoted_identifiers_are_unquoted():
    parsed = step_1_1_ddl_parsing('CREATE TABLE "Emp" (`id` INT, "name" TEXT, [dept] INT)')
    assert parsed.table_name == "Emp"
    assert parsed.attributes == ["id", "name", "dept"]


def test_comments_and_duplicates():
    ddl = """CREATE TABLE t (
        A INT, -- the key
        B INT,
        A INT
    )"""
    parsed = step_1_1_ddl_parsing(ddl)
    assert parsed.attributes == ["A", "B"]


def test_attribute_names_are_case_sensitive():
    parsed = step_1_1_ddl_parsing("CREATE TABLE t (A INT, a INT)")
    assert parsed.attributes == ["A", "a"]


def test_missing_primary_key():
    parsed = step_1_1_ddl_parsing("CREATE TABLE t (A INT, B INT)")
    assert parsed.primary_key == []


def test_empty_column_list():
    parsed = step_1_1_ddl_parsing("CREATE TABLE t ()")
    assert parsed.table_name == "t"
    assert parsed.attributes == []


def test_text_without_parentheses_raises():
    with pytest.raises(DDLParseError) as exc_info:
        step_1_1_ddl_parsing("CREATE TABLE nothing_here")
    assert exc_info.value.context.step_id == "1.1"
    assert str(exc_info.value).startswith("[1.1]")


def test_parse_error_records_first_source_line():
    with pytest.raises(DDLParseError) as exc_info:
        step_1_1_ddl_parsing("\n  CREATE TABLE broken\n  A INT, B INT\n")
    assert exc_info.value.context.source_line == "CREATE TABLE broken"
