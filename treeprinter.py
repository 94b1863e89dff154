"""ASCII diagrams of binary trees.

The printer knows nothing about the nodes it draws: it is given three
accessors (label, left child, right child) and a line sink. Each subtree is
laid out as a list of TreeLine rows whose offsets are measured from the
column the subtree hangs from, so two subtrees can be joined side by side
with the smallest gap that keeps them from overlapping.
"""


def spaces(n):
    return " " * max(0, n)


class TreeLine():
    def __init__(self, line, left_offset, right_offset):
        self.line = line
        self.left_offset = left_offset
        self.right_offset = right_offset

    def shifted(self, adjust):
        return TreeLine(self.line, self.left_offset + adjust, self.right_offset + adjust)

    def __eq__(self, other):
        return (self.line, self.left_offset, self.right_offset) == \
            (other.line, other.left_offset, other.right_offset)

    def __repr__(self):
        return "TreeLine({!r}, {}, {})".format(self.line, self.left_offset, self.right_offset)


def min_left_offset(tree_lines):
    return min((tree_line.left_offset for tree_line in tree_lines), default=0)


def max_right_offset(tree_lines):
    return max((tree_line.right_offset for tree_line in tree_lines), default=0)


def root_spacing(left_lines, right_lines, hspace):
    spacing = 0
    for left_line, right_line in zip(left_lines, right_lines):
        spacing = max(spacing, left_line.right_offset - right_line.left_offset)
    spacing += hspace
    # branch glyphs are symmetric around the root column
    if spacing % 2 == 0:
        spacing += 1
    return spacing


def join_lines(left_lines, right_lines, spacing, left_adjust, right_adjust, square_branches=False):
    if spacing == 1:
        gap = 1 if square_branches else 3
    else:
        gap = spacing

    joined = []
    for index in range(max(len(left_lines), len(right_lines))):
        if index >= len(left_lines):
            joined.append(right_lines[index].shifted(right_adjust))
        elif index >= len(right_lines):
            joined.append(left_lines[index].shifted(left_adjust))
        else:
            left_line = left_lines[index]
            right_line = right_lines[index]
            padding = spaces(gap - left_line.right_offset + right_line.left_offset)
            joined.append(TreeLine(
                left_line.line + padding + right_line.line,
                left_line.left_offset + left_adjust,
                right_line.right_offset + right_adjust))
    return joined


class TreePrinter():
    def __init__(self, get_label, get_left, get_right, out=print):
        self.get_label = get_label
        self.get_left = get_left
        self.get_right = get_right
        self.out = out
        self.square_branches = False
        self.lr_agnostic = False
        self.hspace = 2

    def print_tree(self, root):
        for line in self.tree_to_lines(root):
            self.out(line)

    def tree_to_lines(self, root):
        tree_lines = self.build_tree_lines(root)
        min_left = min_left_offset(tree_lines)
        max_right = max_right_offset(tree_lines)
        return [spaces(tree_line.left_offset - min_left) + tree_line.line
                + spaces(max_right - tree_line.right_offset)
                for tree_line in tree_lines]

    def build_tree_lines(self, root):
        if root is None:
            return []

        root_label = str(self.get_label(root))
        left_lines = self.build_tree_lines(self.get_left(root))
        right_lines = self.build_tree_lines(self.get_right(root))

        spacing = root_spacing(left_lines, right_lines, self.hspace)

        all_lines = [TreeLine(root_label, -((len(root_label) - 1) // 2), len(root_label) // 2)]
        branch_lines, left_adjust, right_adjust = self.branches(
            bool(left_lines), bool(right_lines), spacing)
        all_lines.extend(branch_lines)
        all_lines.extend(join_lines(
            left_lines, right_lines, spacing, left_adjust, right_adjust, self.square_branches))
        return all_lines

    def branches(self, has_left, has_right, spacing):
        """Return the branch rows under a root and the shift for each subtree."""
        if not has_left and not has_right:
            return [], 0, 0

        if not has_left or not has_right:
            if self.square_branches and self.lr_agnostic:
                return [TreeLine("|", 0, 0)], 0, 0
            if has_right:
                if self.square_branches:
                    return [TreeLine("+--+", 0, 3)], 0, 3
                return [TreeLine("\\", 1, 1)], 0, 2
            if self.square_branches:
                return [TreeLine("+--+", -3, 0)], -3, 0
            return [TreeLine("/", -1, -1)], -2, 0

        if self.square_branches:
            adjust = spacing // 2 + 1
            horizontal = "-" * (spacing // 2)
            return [TreeLine("+" + horizontal + "+" + horizontal + "+", -adjust, adjust)], -adjust, adjust

        if spacing == 1:
            return [TreeLine("/ \\", -1, 1)], -2, 2

        lines = []
        for i in range(1, spacing, 2):
            lines.append(TreeLine("/" + spaces(i) + "\\", -((i + 1) // 2), (i + 1) // 2))
        adjust = spacing // 2 + 1
        return lines, -adjust, adjust
