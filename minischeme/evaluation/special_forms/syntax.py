from minischeme import LispValue
from minischeme.errors import SchemeSyntaxError
from minischeme.types.lists import is_list, to_python_list


def form_arguments(tail: LispValue, count: int, form: str) -> list[LispValue]:
    """Unpack a special form's raw arguments, insisting on exactly `count` of them."""
    if not is_list(tail):
        raise SchemeSyntaxError(f"Syntax error in {form}: arguments must form a proper list")
    args = to_python_list(tail)
    if len(args) != count:
        raise SchemeSyntaxError(
            f"Syntax error in {form}: expected {count} arguments, got {len(args)}"
        )
    return args
