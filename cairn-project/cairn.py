import argparse
from commands import (
    init, hash_object, cat_file, write_tree, read_tree, ls_tree, config
)
# The main entry point for the Cairn object store
def main(argv=None):
    # The main parser
    parser = argparse.ArgumentParser(description="Cairn: a content-addressable object store.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Create an empty repository.")
    init_parser.add_argument("path", nargs="?", help="Directory to initialize (default: current directory).")
    init_parser.set_defaults(func=init.run)

    # Command: hash-object
    hash_parser = subparsers.add_parser("hash-object", help="Compute the object ID of a file or directory.")
    hash_parser.add_argument("path", help="File (blob) or directory (tree) to hash.")
    hash_parser.add_argument("-t", "--type", choices=["blob", "tree"], default="blob", help="Kind of object to create.")
    hash_parser.add_argument("-w", "--write", action="store_true", help="Write the object into the object database.")
    hash_parser.set_defaults(func=hash_object.run)

    # Command: cat-file
    cat_parser = subparsers.add_parser("cat-file", help="Print the content of a stored object.")
    cat_parser.add_argument("oid", help="The object ID.")
    cat_parser.add_argument("-t", "--type", choices=["blob", "tree"], help="Fail unless the object has this kind.")
    cat_parser.set_defaults(func=cat_file.run)

    # Command: write-tree
    write_tree_parser = subparsers.add_parser("write-tree", help="Store a directory and print its tree ID.")
    write_tree_parser.add_argument("path", nargs="?", help="Directory to store (default: repository root).")
    write_tree_parser.set_defaults(func=write_tree.run)

    # Command: read-tree
    read_tree_parser = subparsers.add_parser("read-tree", help="Replace the working directory with a stored tree.")
    read_tree_parser.add_argument("oid", help="The tree ID to restore.")
    read_tree_parser.set_defaults(func=read_tree.run)

    # Command: ls-tree
    ls_tree_parser = subparsers.add_parser("ls-tree", help="List the entries of a stored tree.")
    ls_tree_parser.add_argument("oid", help="The tree ID to list.")
    ls_tree_parser.set_defaults(func=ls_tree.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Set a configuration value.")
    config_parser.add_argument("key", help="The configuration key (e.g., core.excludes).")
    config_parser.add_argument("value", help="The configuration value.")
    config_parser.set_defaults(func=config.run)
    # Parse the arguments
    args = parser.parse_args(argv)

    # If a command was specified, run its function
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
