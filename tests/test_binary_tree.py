from dstextbook.binary_tree import (
    ThreadedNode,
    TreeNode,
    find_thread_successor,
    folder_size,
    inorder,
    postorder,
    preorder,
    thread_inorder,
)


def expression_tree():
    n7 = TreeNode("D")
    n6 = TreeNode("C")
    n5 = TreeNode("B")
    n4 = TreeNode("A")
    n3 = TreeNode("/", n6, n7)
    n2 = TreeNode("*", n4, n5)
    return TreeNode("-", n2, n3)


def folder_tree():
    f11 = TreeNode(120)
    f10 = TreeNode(55)
    f9 = TreeNode(100)
    f8 = TreeNode(200)
    f7 = TreeNode(68, f10, f11)
    f6 = TreeNode(40)
    f5 = TreeNode(15)
    f4 = TreeNode(2, f8, f9)
    f3 = TreeNode(10, f6, f7)
    f2 = TreeNode(0, f4, f5)
    f1 = TreeNode(0, f2, f3)
    return f1, f2, f3


def threaded_tree():
    n7 = ThreadedNode("D")
    n6 = ThreadedNode("C", is_thread_right=True)
    n5 = ThreadedNode("B", is_thread_right=True)
    n4 = ThreadedNode("A", is_thread_right=True)
    n3 = ThreadedNode("/", n6, n7)
    n2 = ThreadedNode("*", n4, n5)
    n1 = ThreadedNode("-", n2, n3)
    n4.right = n2
    n5.right = n1
    n6.right = n3
    return n1, n2, n3, n4, n5, n6, n7


def test_inorder_gives_infix_expression():
    assert "".join(inorder(expression_tree())) == "A*B-C/D"


def test_preorder_gives_prefix_expression():
    assert "".join(preorder(expression_tree())) == "-*AB/CD"


def test_postorder_gives_postfix_expression():
    assert "".join(postorder(expression_tree())) == "AB*CD/-"


def test_traversals_visit_same_nodes():
    root = expression_tree()
    assert sorted(preorder(root)) == sorted(inorder(root)) == sorted(postorder(root))
    assert preorder(root)[0] == root.data
    assert postorder(root)[-1] == root.data


def test_traversals_of_empty_tree():
    assert preorder(None) == []
    assert inorder(None) == []
    assert postorder(None) == []


def test_folder_size_total():
    f1, f2, f3 = folder_tree()
    assert folder_size(f1) == 610


def test_folder_size_is_sum_of_parts():
    f1, f2, f3 = folder_tree()
    assert folder_size(f1) == f1.data + folder_size(f2) + folder_size(f3)


def test_folder_size_is_independent_between_calls():
    f1, f2, f3 = folder_tree()
    first = folder_size(f2)
    folder_size(f3)
    assert folder_size(f2) == first
    assert folder_size(None) == 0


def test_thread_inorder_matches_recursive_inorder():
    n1 = threaded_tree()[0]
    assert "".join(thread_inorder(n1)) == "".join(inorder(expression_tree()))


def test_find_thread_successor_follows_threads():
    n1, n2, n3, n4, n5, n6, n7 = threaded_tree()
    assert find_thread_successor(n4) is n2
    assert find_thread_successor(n5) is n1
    assert find_thread_successor(n6) is n3


def test_find_thread_successor_descends_left():
    n1, n2, n3, n4, n5, n6, n7 = threaded_tree()
    assert find_thread_successor(n2) is n5
    assert find_thread_successor(n1) is n6
    assert find_thread_successor(n3) is n7
    assert find_thread_successor(n7) is None


def test_thread_inorder_single_and_empty():
    assert thread_inorder(ThreadedNode("X")) == ["X"]
    assert thread_inorder(None) == []