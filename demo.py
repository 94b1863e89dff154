from avltree import AVLTree


def main(out=print):
    tree = AVLTree()
    for value in [10, 20, 30, 40, 50, 25]:
        tree.insert(value)

    tree.print(out)

    out("Contains 30: {}".format("Yes" if tree.contains(30) else "No"))
    out("Contains 35: {}".format("Yes" if tree.contains(35) else "No"))

    tree.remove(30)
    out("")
    out("After removing 30:")
    tree.print(out)
    return tree


if __name__ == "__main__":
    main()
