"""
Core Equation Model Objects

Defines the fundamental data structures of a linear fractional
differential equation:

    sum_i a_i d^(p_i) ε / dt^(p_i)  =  sum_j b_j d^(q_j) σ / dt^(q_j)

These are pure data classes representing:
    - Terms (one coefficient × derivative contribution)
    - Equations (two named sides, each a collection of terms)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about rendering or transforms
        - Are populated once, then only read
        - Are fully serializable
"""

import warnings
from dataclasses import dataclass, field
from typing import Iterable, Tuple, Union

from .expressions import (
    Expression,
    UnsupportedValueError,
    as_expression,
    is_term_value,
)


class EquationError(ValueError):
    """Raised when an equation is malformed."""
    pass


class UnknownSideError(KeyError):
    """Raised when a term is inserted under a variable that names neither side."""
    pass


def _check_term_value(value: Expression, role: str) -> Expression:
    if is_term_value(value):
        return value
    raise UnsupportedValueError(
        f"Term {role} must be a real number, a name or a sub-expression, got {value!r}"
    )


@dataclass(frozen=True)
class Term:
    """
    A single term of a differential equation:

        coefficient * d^order / dt^order

    Either value may be a concrete number or a symbolic placeholder
    (a name, or a small expression over names) to be evaluated later.

    Examples:
        Term("η", 1)                  η dε/dt
        Term("k", 0)                  k σ
        Term("cₐ", "α")               cₐ d^α ε / dt^α

    Raw Python values are coerced on construction, so
    Term("η", 1) == Term(Symbol("η"), Literal(1)).

    IMPORTANT:
        This object is immutable (frozen=True).
        Equality and hashing are structural.
        An order of 0 denotes the bare variable.
    """

    coefficient: Expression
    order: Expression

    def __post_init__(self):
        object.__setattr__(
            self, "coefficient", _check_term_value(as_expression(self.coefficient), "coefficient")
        )
        object.__setattr__(self, "order", _check_term_value(as_expression(self.order), "order"))

    @classmethod
    def from_value(cls, value: Union["Term", Tuple]) -> "Term":
        """Build a Term from a Term or a (coefficient, order) pair."""
        if isinstance(value, Term):
            return value
        if _is_pair(value):
            coefficient, order = value
            return cls(coefficient, order)
        raise UnsupportedValueError(f"Expected a Term or a (coefficient, order) pair, got {value!r}")


def _is_pair(value) -> bool:
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        return False
    return not any(isinstance(item, (tuple, list, Term)) for item in value)


def _is_single_term(value) -> bool:
    return isinstance(value, Term) or _is_pair(value)


@dataclass
class Equation:
    """
    Root container for a two-sided linear fractional differential equation.

    Properties:
        left_variable:
            Name of the variable on the left-hand side (e.g. "ε")

        right_variable:
            Name of the variable on the right-hand side (e.g. "σ")

        left_terms / right_terms:
            Tuples of the terms summed on each side, in insertion order.
            Duplicate terms collapse to one. Writes go through
            add_term / add_terms.

    Lifecycle:
        Created empty with its two variable names, populated with
        add_term / add_terms, then handed to the builders, which
        never mutate it.

    Equality:
        Each side is a set of terms: two equations are equal when their
        variables match and each side holds the same terms, whatever
        order they were inserted in.

    INVARIANTS:
        - left_variable and right_variable are distinct, non-empty names
        - every term sits on the side whose variable it was inserted under
        - no side contains the same term twice
    """

    left_variable: str
    right_variable: str
    left_terms: Tuple[Term, ...] = field(default=(), compare=False)
    right_terms: Tuple[Term, ...] = field(default=(), compare=False)

    def __post_init__(self):
        if not self.left_variable or not self.right_variable:
            raise EquationError("Equation variables must be non-empty names")
        if self.left_variable == self.right_variable:
            raise EquationError(
                f"Both sides use the same variable {self.left_variable!r}"
            )
        left_terms, right_terms = self.left_terms, self.right_terms
        self.left_terms = ()
        self.right_terms = ()
        self.add_terms(self.left_variable, left_terms)
        self.add_terms(self.right_variable, right_terms)

    def __eq__(self, other):
        if not isinstance(other, Equation):
            return NotImplemented
        return (
            self.left_variable == other.left_variable
            and self.right_variable == other.right_variable
            and frozenset(self.left_terms) == frozenset(other.left_terms)
            and frozenset(self.right_terms) == frozenset(other.right_terms)
        )

    @classmethod
    def build(cls, **sides) -> "Equation":
        """
        Build a populated equation from exactly two keyword sides.

        The first keyword is the left side, the second the right side.
        Each value is a single (coefficient, order) pair or a tuple of them.

        Example:
            Equation.build(ε=("η", 1), σ=(("k", 0), ("η", 1)))
        """
        if len(sides) != 2:
            raise EquationError(f"An equation needs exactly two sides, got {len(sides)}")
        (left, left_terms), (right, right_terms) = sides.items()
        equation = cls(left, right)
        equation.add_terms(left, left_terms)
        equation.add_terms(right, right_terms)
        return equation

    def _side_attribute(self, variable: str) -> str:
        if variable == self.left_variable:
            return "left_terms"
        if variable == self.right_variable:
            return "right_terms"
        raise UnknownSideError(
            f"{variable!r} is neither {self.left_variable!r} nor {self.right_variable!r}"
        )

    def add_term(self, variable: str, term: Union[Term, Tuple], strict: bool = True) -> bool:
        """
        Add one term to the side named by variable.

        Args:
            variable: Side variable name
            term: Term or (coefficient, order) pair
            strict: If False, a term for an unknown variable is dropped
                with a UserWarning instead of raising UnknownSideError

        Returns:
            True if the term was stored, False if it was a duplicate
            (or dropped in non-strict mode)
        """
        term = Term.from_value(term)
        try:
            attribute = self._side_attribute(variable)
        except UnknownSideError:
            if strict:
                raise
            warnings.warn(f"Dropping term {term} for unknown variable {variable!r}", UserWarning)
            return False
        side = getattr(self, attribute)
        if term in side:
            return False
        setattr(self, attribute, side + (term,))
        return True

    def add_terms(self, variable: str, terms: Union[Term, Tuple, Iterable], strict: bool = True) -> int:
        """
        Add a single term or a batch of terms to one side.

        Returns:
            Number of terms actually stored
        """
        if _is_single_term(terms):
            terms = [terms]
        return sum(1 for term in terms if self.add_term(variable, term, strict=strict))

    def terms_for(self, variable: str) -> Tuple[Term, ...]:
        """Return the terms on the side named by variable."""
        return getattr(self, self._side_attribute(variable))

    def sides(self) -> Tuple[Tuple[str, Tuple[Term, ...]], Tuple[str, Tuple[Term, ...]]]:
        """Return ((left_variable, left_terms), (right_variable, right_terms))."""
        return (
            (self.left_variable, self.left_terms),
            (self.right_variable, self.right_terms),
        )
