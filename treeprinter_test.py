from treeprinter import TreeLine, TreePrinter, join_lines, root_spacing


class Node():
    def __init__(self, label, left=None, right=None):
        self.label = label
        self.left = left
        self.right = right


def make_printer(square_branches=False, lr_agnostic=False, hspace=2):
    lines = []
    printer = TreePrinter(
        lambda node: node.label,
        lambda node: node.left,
        lambda node: node.right,
        out=lines.append)
    printer.square_branches = square_branches
    printer.lr_agnostic = lr_agnostic
    printer.hspace = hspace
    return printer, lines


def test_empty_tree_prints_nothing():
    printer, lines = make_printer()
    printer.print_tree(None)

    assert lines == []
    assert printer.tree_to_lines(None) == []


def test_single_node():
    printer, lines = make_printer()
    printer.print_tree(Node("42"))

    assert lines == ["42"]


def test_label_offsets():
    printer, _ = make_printer()

    assert printer.build_tree_lines(Node("abcd")) == [TreeLine("abcd", -1, 2)]
    assert printer.build_tree_lines(Node("abc")) == [TreeLine("abc", -1, 1)]
    assert printer.build_tree_lines(Node("a")) == [TreeLine("a", 0, 0)]


def test_diagonal_two_children():
    printer, _ = make_printer()

    assert printer.tree_to_lines(Node("2", Node("1"), Node("3"))) == [
        "  2  ",
        " / \\ ",
        "1   3",
    ]


def test_diagonal_narrow_spacing():
    printer, _ = make_printer(hspace=1)

    assert printer.build_tree_lines(Node("2", Node("1"), Node("3"))) == [
        TreeLine("2", 0, 0),
        TreeLine("/ \\", -1, 1),
        TreeLine("1   3", -2, 2),
    ]


def test_diagonal_wide_spacing_fans_out():
    printer, _ = make_printer(hspace=5)

    assert printer.tree_to_lines(Node("2", Node("1"), Node("3"))) == [
        "   2   ",
        "  / \\  ",
        " /   \\ ",
        "1     3",
    ]


def test_diagonal_single_children():
    printer, _ = make_printer()

    assert printer.tree_to_lines(Node("1", None, Node("2"))) == ["1  ", " \\ ", "  2"]
    assert printer.tree_to_lines(Node("2", Node("1"))) == ["  2", " / ", "1  "]


def test_square_two_children():
    printer, _ = make_printer(square_branches=True, hspace=3)

    assert printer.tree_to_lines(Node("2", Node("1"), Node("3"))) == [
        "  2  ",
        "+-+-+",
        "1   3",
    ]


def test_square_single_children():
    printer, _ = make_printer(square_branches=True)

    assert printer.tree_to_lines(Node("1", None, Node("2"))) == ["1   ", "+--+", "   2"]
    assert printer.tree_to_lines(Node("2", Node("1"))) == ["   2", "+--+", "1   "]


def test_square_lr_agnostic_single_child():
    printer, _ = make_printer(square_branches=True, lr_agnostic=True)

    assert printer.tree_to_lines(Node("1", None, Node("2"))) == ["1", "|", "2"]
    assert printer.tree_to_lines(Node("2", Node("1"))) == ["2", "|", "1"]


def test_lr_agnostic_ignored_for_diagonal_branches():
    printer, _ = make_printer(lr_agnostic=True)

    assert printer.tree_to_lines(Node("1", None, Node("2"))) == ["1  ", " \\ ", "  2"]


def test_wide_labels_are_spaced_apart():
    printer, _ = make_printer(square_branches=True, hspace=3)
    root = Node("20[0]", Node("10[0]"), Node("30[0]"))

    assert printer.tree_to_lines(root) == [
        "    20[0]    ",
        "  +---+---+  ",
        "10[0]   30[0]",
    ]


def test_rows_form_a_rectangle():
    root = Node("root",
        Node("l", Node("ll", Node("lll")), Node("lr", None, Node("lrr"))),
        Node("right", None, Node("rr", Node("rrl"), Node("rrr"))))
    for square_branches in (False, True):
        for lr_agnostic in (False, True):
            for hspace in (0, 1, 2, 3, 4):
                printer, lines = make_printer(square_branches, lr_agnostic, hspace)
                printer.print_tree(root)
                assert len(set(len(line) for line in lines)) == 1
                assert lines[0].strip() == "root"


def test_printer_does_not_touch_nodes():
    root = Node("b", Node("a"), Node("c"))
    printer, _ = make_printer()
    printer.print_tree(root)

    assert root.left.label == "a"
    assert root.right.label == "c"


def test_root_spacing_is_odd():
    left = [TreeLine("x", 0, 0)]
    right = [TreeLine("y", 0, 0)]

    assert root_spacing(left, right, 2) == 3
    assert root_spacing(left, right, 3) == 3
    assert root_spacing([TreeLine("xxx", -1, 1)], [TreeLine("yyy", -1, 1)], 2) == 5
    assert root_spacing([], right, 2) == 3


def test_join_lines_uneven_depths():
    left = [TreeLine("a", 0, 0), TreeLine("/", -1, -1), TreeLine("b", -2, -2)]
    right = [TreeLine("c", 0, 0)]

    assert join_lines(left, right, 3, -2, 2) == [
        TreeLine("a   c", -2, 2),
        TreeLine("/", -3, -3),
        TreeLine("b", -4, -4),
    ]
