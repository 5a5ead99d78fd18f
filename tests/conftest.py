# tests/conftest.py
# This file is part of GoloSpec - binary formula core for specification logic
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the formula test suite.

Makes the project root importable when the suite runs from a source checkout
and provides small formula trees shared by several test modules.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from formula import Atom, BinaryFormula, Operator


@pytest.fixture
def x():
    return Atom("x")


@pytest.fixture
def y():
    return Atom("y")


@pytest.fixture
def z():
    return Atom("z")


@pytest.fixture
def sum_times_z(x, y, z):
    """Provide ((x + y) * z).

    Returns:
        BinaryFormula: Two-level tree with a nested left operand
    """
    return BinaryFormula(BinaryFormula(x, Operator.PLUS, y), Operator.MULTIPLICATION, z)


@pytest.fixture
def guarded_bound():
    """Provide an implication over two conjoined comparisons.

    Returns:
        BinaryFormula: (((0 <= i) /\\ (i < n)) -> (a_i <> 0))
    """
    bounds = BinaryFormula(
        BinaryFormula(Atom("0"), Operator.LESS_OR_EQUALS, Atom("i")),
        Operator.CONJUNCTIVE,
        BinaryFormula(Atom("i"), Operator.LESS, Atom("n")),
    )
    return BinaryFormula(
        bounds,
        Operator.IMPLICATIVE,
        BinaryFormula(Atom("a_i"), Operator.NOT_EQUALS, Atom("0")),
    )
