from rakelint import tree
from rakelint.context import resolve_effective_sequence
from rakelint.loader import build_tree
from rakelint.tree import BlockNode, CallNode, OtherNode, StringNode, SymbolNode

DESC = ["send", None, "desc", ["str", "Build it"]]


def _task_data(name: str) -> list:
    return ["send", None, "task", ["sym", name]]


def _find_task(root, name):
    for node in tree.walk(root):
        if isinstance(node, CallNode) and node.method_name == "task":
            if node.arguments and getattr(node.arguments[0], "value", None) == name:
                return node
    raise AssertionError(f"task {name} not found")


def test_root_call_has_singleton_sequence():
    call = build_tree(_task_data("build"))
    sequence, described = resolve_effective_sequence(call)
    assert sequence.nodes == (call,)
    assert sequence.index == 0
    assert not described


def test_plain_siblings_are_the_parent_children():
    root = build_tree(["begin", DESC, _task_data("build")])
    call = _find_task(root, "build")
    sequence, described = resolve_effective_sequence(call)
    assert sequence.nodes == root.children
    assert sequence.anchor is call
    assert described


def test_block_form_checks_before_the_whole_block():
    root = build_tree(["begin", DESC, ["block", _task_data("build"), ["args"], None]])
    call = _find_task(root, "build")
    block = call.parent
    sequence, described = resolve_effective_sequence(call)
    assert sequence.nodes == root.children
    assert sequence.anchor is block
    assert described


def test_task_inside_block_body_uses_the_body_statements():
    inner_desc = CallNode(method_name="desc", arguments=(StringNode("Inner"),))
    inner = CallNode(method_name="task", arguments=(SymbolNode("inner"),))
    outer = CallNode(method_name="task", arguments=(SymbolNode("outer"),))
    block = tree.link_parents(BlockNode(call=outer, body=(inner_desc, inner)))
    sequence, described = resolve_effective_sequence(inner)
    assert sequence.nodes == block.children
    assert sequence.index == 2
    assert described


def test_unwrapping_is_only_one_level():
    # desc outside a namespace block does not describe a task inside it
    root = build_tree(
        [
            "begin",
            DESC,
            ["block", ["send", None, "namespace", ["sym", "db"]], ["args"], _task_data("migrate")],
        ]
    )
    call = _find_task(root, "migrate")
    sequence, described = resolve_effective_sequence(call)
    assert sequence.anchor is call
    assert not described


def test_preceding_task_does_not_count_as_description():
    root = build_tree(["begin", DESC, _task_data("a"), _task_data("b")])
    _, described = resolve_effective_sequence(_find_task(root, "b"))
    assert not described


def test_first_statement_does_not_wrap_around():
    root = build_tree(["begin", _task_data("a"), DESC])
    _, described = resolve_effective_sequence(_find_task(root, "a"))
    assert not described


def test_block_without_parent_resolves_to_itself():
    block = build_tree(["block", _task_data("build"), ["args"]])
    sequence, described = resolve_effective_sequence(block.call)
    assert sequence.nodes == (block,)
    assert not described


def test_inconsistent_parent_link_degrades_to_no_description():
    desc = CallNode(method_name="desc", arguments=(StringNode("x"),))
    orphan = CallNode(method_name="task", arguments=(SymbolNode("x"),))
    orphan.parent = OtherNode(type="begin", nodes=(desc,))
    sequence, described = resolve_effective_sequence(orphan)
    assert sequence.index is None
    assert sequence.preceding() is None
    assert not described
