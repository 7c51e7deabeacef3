from trie import Trie

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "
END_MARK = " *"


def format_trie(trie: Trie, root_label: str = ".") -> str:
    """
    Render a trie as a tree, one edge per line.

    Words end at the characters marked with " *". Children are listed in
    sorted order.

        .
        └── c
            └── a
                ├── r *
                │   └── t *
                └── t *
    """
    lines = [root_label + (END_MARK if trie.root.is_end else "")]
    # is_last flags of the ancestors of the current edge, by depth
    open_branches = []
    for depth, ch, node, is_last in trie.walk():
        del open_branches[depth - 1:]
        indent = "".join(SPACE if last else PIPE for last in open_branches)
        connector = LAST_BRANCH if is_last else BRANCH
        lines.append(f"{indent}{connector}{ch}{END_MARK if node.is_end else ''}")
        open_branches.append(is_last)
    return "\n".join(lines)


def print_trie(trie: Trie, file=None) -> None:
    print(format_trie(trie), file=file)
