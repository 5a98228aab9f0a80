"""Skip illegal characters instead of aborting the scan."""

from dfalex import LexicalError, Scanner, TokenKind

scanner = Scanner("int Foo bar")
while True:
    try:
        kind = scanner.next_token()
    except LexicalError as e:
        print(f"skipping: {e}")
        scanner.resync()
        continue
    if kind == TokenKind.EOF:
        break
    print(kind.label)
