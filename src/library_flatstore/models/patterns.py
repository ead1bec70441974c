"""
Fixed-width template matching for field validators.

Each template character constrains the input character at the same
position:

- ``#`` an ASCII decimal digit
- ``@`` a letter
- ``_`` a space
- ``?`` anything
- any other character must appear literally
"""

ISBN_TEMPLATE = "###-#-##-######-#"
PHONE_TEMPLATE = "##########"


def matches(value: str, template: str) -> bool:
    """Check ``value`` against ``template`` position by position."""
    if len(value) != len(template):
        return False

    for char, expected in zip(value, template):
        if expected == "#":
            if not "0" <= char <= "9":
                return False
        elif expected == "@":
            if not char.isalpha():
                return False
        elif expected == "_":
            if char != " ":
                return False
        elif expected == "?":
            continue
        elif char != expected:
            return False

    return True
