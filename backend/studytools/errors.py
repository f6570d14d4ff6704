class ToolError(Exception):
    """Base for user-facing tool failures. `code` is the stable name sent to clients."""
    code = "ToolError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.message, "code": self.code}


# Linear solver
class MissingEqualsSign(ToolError):
    code = "MissingEqualsSign"

    def __init__(self):
        super().__init__("Equation must contain an equals sign (=)")


class MissingVariable(ToolError):
    code = "MissingVariable"

    def __init__(self):
        super().__init__("Equation must contain variable 'x'")


class InvalidNumericLiteral(ToolError):
    code = "InvalidNumericLiteral"

    def __init__(self, literal: str):
        super().__init__(f"Invalid number {literal!r}. Use format like '2x+3=7'")
        self.literal = literal


class ZeroCoefficient(ToolError):
    code = "ZeroCoefficient"

    def __init__(self):
        super().__init__("Coefficient of x is zero, so the equation has no unique solution")


class UnsupportedEquationForm(ToolError):
    code = "UnsupportedEquationForm"

    def __init__(self, reason: str):
        super().__init__(f"Unsupported equation: {reason}")
        self.reason = reason


# Number base converter
class InvalidDigitForBase(ToolError):
    code = "InvalidDigitForBase"

    def __init__(self, base_name: str):
        super().__init__(f"Invalid character for {base_name}")
        self.base_name = base_name


class OutOfRange(ToolError):
    code = "OutOfRange"

    def __init__(self, limit: int):
        super().__init__(f"Value is too large to convert exactly (maximum is {limit})")
        self.limit = limit


class UnsupportedBase(ToolError):
    code = "UnsupportedBase"

    def __init__(self, base):
        super().__init__(f"Unsupported base {base!r}. Use 2, 8, 10 or 16")
        self.base = base
