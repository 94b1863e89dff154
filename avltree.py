from treeprinter import TreePrinter


class TreeNode:
    def __init__(self, value):
        self.value = value
        self.height = 1
        self.left = None
        self.right = None

    def is_leaf(self):
        return self.height == 1

    @property
    def left_height(self) -> int:
        if self.left:
            return self.left.height
        else:
            return 0

    @property
    def right_height(self) -> int:
        if self.right:
            return self.right.height
        else:
            return 0

    @property
    def balance(self) -> int:
        return self.left_height - self.right_height

    def update(self):
        self.height = 1 + max(self.left_height, self.right_height)


class AVLTree():
    """Ordered set of distinct values kept height-balanced after every edit."""

    def __init__(self):
        self.root = None
        self.size = 0
        self.rotations = {
            "LL": self.rotate_ll,
            "LR": self.rotate_lr,
            "RR": self.rotate_rr,
            "RL": self.rotate_rl,
        }

    @property
    def height(self):
        if self.root:
            return self.root.height
        else:
            return 0

    def __len__(self):
        return self.size

    def __contains__(self, value):
        return self.contains(value)

    def __iter__(self):
        yield from self._walk(self.root)

    def _walk(self, node):
        if node:
            yield from self._walk(node.left)
            yield node.value
            yield from self._walk(node.right)

    def insert(self, value):
        self.root = self._insert(self.root, value)

    def _insert(self, node: TreeNode, value) -> TreeNode:
        if not node:
            self.size += 1
            return TreeNode(value)

        if value < node.value:
            node.left = self._insert(node.left, value)
        elif value > node.value:
            node.right = self._insert(node.right, value)
        else:
            return node

        return self.rebalance(node)

    def remove(self, value):
        self.root = self._remove(self.root, value)

    def _remove(self, node: TreeNode, value) -> TreeNode:
        if not node:
            return None

        if value < node.value:
            node.left = self._remove(node.left, value)
        elif value > node.value:
            node.right = self._remove(node.right, value)
        else:
            if not node.left:
                self.size -= 1
                return node.right
            if not node.right:
                self.size -= 1
                return node.left

            # two children: take over the inorder successor's value
            successor = self.find_min(node.right)
            node.value = successor.value
            node.right = self._remove(node.right, successor.value)

        return self.rebalance(node)

    @staticmethod
    def find_min(node: TreeNode) -> TreeNode:
        while node.left:
            node = node.left
        return node

    def _search(self, value) -> TreeNode:
        node = self.root
        while node:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def contains(self, value) -> bool:
        return self._search(value) is not None

    def get(self, value):
        node = self._search(value)
        if node:
            return node.value
        return None

    def inorder(self, visitor):
        for value in self:
            visitor(value)

    def rebalance(self, node: TreeNode) -> TreeNode:
        node.update()
        balance = node.balance
        if balance > 1:
            case = "LR" if node.left.balance < 0 else "LL"
        elif balance < -1:
            case = "RL" if node.right.balance > 0 else "RR"
        else:
            return node
        return self.rotations[case](node)

    def rotate_ll(self, node: TreeNode) -> TreeNode:
        return self.rotate_right(node)

    def rotate_lr(self, node: TreeNode) -> TreeNode:
        node.left = self.rotate_left(node.left)
        return self.rotate_right(node)

    def rotate_rr(self, node: TreeNode) -> TreeNode:
        return self.rotate_left(node)

    def rotate_rl(self, node: TreeNode) -> TreeNode:
        node.right = self.rotate_right(node.right)
        return self.rotate_left(node)

    def rotate_left(self, node: TreeNode) -> TreeNode:
        pivot = node.right
        tmp = pivot.left

        pivot.left = node
        node.right = tmp

        node.update()
        pivot.update()
        return pivot

    def rotate_right(self, node: TreeNode) -> TreeNode:
        pivot = node.left
        tmp = pivot.right

        pivot.right = node
        node.left = tmp

        node.update()
        pivot.update()
        return pivot

    def check(self):
        """Assert the height, balance and ordering invariants of every node.

        A failure here means the tree itself is corrupt, not that it was
        used wrongly.
        """
        count = self._check(self.root, None, None)
        assert count == self.size, "size {} but {} nodes".format(self.size, count)
        return True

    def _check(self, node, low, high):
        if not node:
            return 0
        assert low is None or node.value > low, "{} out of order".format(node.value)
        assert high is None or node.value < high, "{} out of order".format(node.value)
        count = self._check(node.left, low, node.value) + self._check(node.right, node.value, high)
        assert node.height == 1 + max(node.left_height, node.right_height), \
            "stale height at {}".format(node.value)
        assert abs(node.balance) <= 1, "unbalanced at {}".format(node.value)
        return count + 1

    def printer(self, out=print):
        printer = TreePrinter(
            lambda node: "{}[{}]".format(node.value, node.balance),
            lambda node: node.left,
            lambda node: node.right,
            out=out)
        printer.square_branches = True
        printer.hspace = 3
        return printer

    def print(self, out=print):
        out("Tree structure:")
        self.printer(out).print_tree(self.root)
        out("")
        out("Inorder traversal: " + " ".join(str(value) for value in self))
