from __future__ import annotations

"""
Sample Session Layout.

Builds the tree a fresh session starts from: four top-level folders, each
holding one sample document.
"""

from vexplorer.core.tree import VirtualTree, add_item, make_directory
from vexplorer.domain.tree_models import FileNode

_HELLO_CPP = (
    "#include <iostream>\n"
    "using namespace std;\n"
    "int main1() \n"
    "{\n"
    "    cout << \"Hello, World!\" << endl;\n"
    "    return 0;\n"
    "}"
)

_NUMBERS = "0321-4567483\n0342-4563452\n0322-1345321\n0321-2233445\n0323-2345543"


def build_sample_tree() -> VirtualTree:
    """
    Create the default session tree.

    Layout::

        root
          Desktop/name.txt
          Documents/hello.cpp
          Downloads/numbers.txt
          Pictures/vacation.txt
    """
    tree = VirtualTree()
    root = tree.root

    desktop = add_item(root, make_directory("Desktop"))
    documents = add_item(root, make_directory("Documents"))
    downloads = add_item(root, make_directory("Downloads"))
    pictures = add_item(root, make_directory("Pictures"))

    add_item(desktop, FileNode(name="name", extension=".txt", content="This is a sample text file."))
    add_item(documents, FileNode(name="hello", extension=".cpp", content=_HELLO_CPP))
    add_item(downloads, FileNode(name="numbers", extension=".txt", content=_NUMBERS))
    add_item(pictures, FileNode(name="vacation", extension=".txt", content="Beach photos from summer vacation"))

    return tree
