"""Pytest configuration and fixtures."""

import pytest

from mdast_deflist.parser import MarkdownParser


@pytest.fixture
def parser() -> MarkdownParser:
    """A fresh markdown parser."""
    return MarkdownParser()


@pytest.fixture
def definition_with_list() -> str:
    """A definition followed by a nested bullet list."""
    return """Term
: Definition
  - item A
  - item B
"""


@pytest.fixture
def definition_of_items() -> str:
    """A definition that is only a bullet list."""
    return """Term
: - item A
  - item B
  - item C
"""


@pytest.fixture
def consecutive_definitions() -> str:
    """Two definition blocks with nothing else between them."""
    return """Term 1
: Definition 1

Term 2
: Definition 2
"""


@pytest.fixture
def numbered_definition() -> str:
    """A definition that is a numbered list."""
    return """Term
: 1. First
  2. Second
  3. Third
"""


@pytest.fixture
def emphasised_items() -> str:
    """A definition list whose items start with inline markup."""
    return """Term
: - **item** A
  - **item** B
"""
