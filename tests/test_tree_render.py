from rich.console import Console

from operette import Operation
from operette.utils.tree import build_rich_tree, describe, iter_operations


def _chain():
    root = Operation(name="city")
    ok = root.then(lambda v: v.upper())
    ok.then(lambda v: [v])
    root.catch(lambda e: "fallback")
    return root


def test_iter_operations_depth_first():
    root = _chain()
    depths = [d for d, _ in iter_operations(root)]
    assert depths == [0, 1, 2, 1]


def test_describe_states():
    root = _chain()
    assert describe(root) == "city pending"
    root.succeed("nyc")
    assert describe(root) == "city succeeded 'nyc'"
    assert describe(Operation.failed("boom", name="w")) == "w failed 'boom'"


def test_describe_truncates_long_payloads():
    text = describe(Operation.succeeded("x" * 200, name="big"))
    assert text.endswith("…")
    assert len(text) < 100


def test_render_plain(capsys):
    root = _chain()
    root.succeed("nyc")
    console = Console(force_terminal=False, width=80)
    console.print(build_rich_tree(root, icons_on=False))
    out = capsys.readouterr().out
    assert "Operation chain" in out
    assert "city succeeded 'nyc'" in out
    assert "['NYC']" in out  # payload brackets are not eaten as markup
    assert "✓" not in out


def test_deep_chain_walk_and_tree():
    root = Operation(name="root")
    tail = root
    for _ in range(3000):
        tail = tail.then(lambda v: v)
    root.succeed("x")

    walked = list(iter_operations(root))
    assert len(walked) == 3001
    assert walked[-1] == (3000, tail)

    tree = build_rich_tree(root, icons_on=False)
    depth, node = 0, tree
    while node.children:
        assert len(node.children) == 1
        node = node.children[0]
        depth += 1
    assert depth == 3001  # header plus every operation


def test_tree_keeps_sibling_order():
    root = Operation(name="root")
    a = root.then(lambda v: v)
    b = root.then(lambda v: v)
    ids = [op.id for _, op in iter_operations(root)]
    assert ids == [root.id, a.id, b.id]
    tree = build_rich_tree(root, icons_on=False)
    labels = [str(child.label) for child in tree.children[0].children]
    assert a.id in labels[0] and b.id in labels[1]
