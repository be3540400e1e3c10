# automaton_engine/delimiters.py

OPENERS = "([{"
PAIRS = {')': '(', ']': '[', '}': '{'}


def check_balanced(text: str) -> bool:
    """Stack machine: accept iff every bracket closes its most recent opener."""
    stack = []
    for c in text:
        if c in OPENERS:
            stack.append(c)
        elif c in PAIRS:
            if not stack or stack[-1] != PAIRS[c]:
                return False
            stack.pop()
    return not stack
