import ast


def resolve(node: ast.AST | None) -> str | None:
  """Reduce a node to a constant string, or None if it isn't one.

  Only string constants, placeholder-free f-strings and `+` chains of them
  are understood. Names, f-strings with placeholders, bytes and calls all
  come back as None.
  """
  if isinstance(node, ast.Constant):
    return node.value if isinstance(node.value, str) else None

  # f"Hello" has no placeholders, so it's just as constant as "Hello"
  if isinstance(node, ast.JoinedStr):
    parts = [resolve(value) for value in node.values]
    return None if None in parts else ''.join(parts)

  if isinstance(node, ast.BinOp) and isinstance(node.op, ast.Add):
    left = resolve(node.left)
    if left is None:
      return None
    right = resolve(node.right)
    if right is None:
      return None
    return left + right

  return None
