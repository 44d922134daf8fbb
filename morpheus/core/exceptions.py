"""
Exception hierarchy for Morpheus.

All exceptions inherit from MorpheusError to allow catching any
library-specific error. Matrix operations raise the most specific class
available here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Every check runs before any data is written, so a raised error
      always leaves the receiving matrix unchanged
"""


class MorpheusError(Exception):
    """Base exception for all Morpheus errors."""
    pass


class ValidationError(MorpheusError):
    """
    Input validation failed.

    Raised when user-provided inputs (matrix data, combining function
    results) fail validation checks.
    """
    pass


class InvalidStructureError(ValidationError):
    """
    Matrix data is not a non-empty rectangular sequence of numeric rows.

    Raised by Matrix construction and Matrix.set_data().
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incompatible.

    Base class for shape errors between two matrices.

    Attributes:
        left_shape: (rows, columns) of the left-hand operand, if known
        right_shape: (rows, columns) of the right-hand operand, if known
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class SizeMismatchError(DimensionError):
    """
    Element-wise operands differ in shape.

    Raised by element-wise binary operations (add, subtract and the
    generic synchronous operation) when row or column counts differ.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Matrix product operands have incompatible inner dimensions.

    Raised by multiply when the left-hand column count differs from the
    right-hand row count.
    """
    pass


class NumericalError(MorpheusError):
    """
    Numerical computation failed.

    Base class for errors arising from arithmetic that cannot be carried out.
    """
    pass


class DivisionByZeroError(NumericalError, ZeroDivisionError):
    """
    Scalar division by zero was requested.

    Also a ZeroDivisionError, so callers catching the builtin keep working.

    Attributes:
        divisor: The offending divisor
    """

    def __init__(self, message: str, divisor: float | None = None):
        super().__init__(message)
        self.divisor = divisor


class ElementNotFoundError(MorpheusError, IndexError):
    """
    Requested element position does not exist.

    Also an IndexError, matching the builtin sequence protocol.

    Attributes:
        row: Requested row index
        column: Requested column index
        shape: (rows, columns) of the matrix at the time of the lookup
    """

    def __init__(
        self,
        message: str,
        row=None,
        column=None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.column = column
        self.shape = shape
