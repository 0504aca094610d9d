"""
Runs the traversals on the fixture tree and graph and prints their results.
"""
import argparse
import sys
from typing import Callable, Dict, List, Optional

from tqdm import tqdm

from traverses import logger
from traverses.binary_tree import inorder, preorder, postorder
from traverses.fixtures import mk_fixture_tree, mk_fixture_graph
from traverses.graph import VertexOutOfRangeError
from traverses.logger import eprint

TREE_TRAVERSALS: Dict[str, Callable] = {
    "inorder": inorder,
    "preorder": preorder,
    "postorder": postorder,
}
TRAVERSE_METHODS = list(TREE_TRAVERSALS) + ["dfs"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="traverses",
        description="Print binary tree traversals and graph DFS over the built-in fixtures")
    parser.add_argument("--traverse-method", choices=TRAVERSE_METHODS + ["all"], default="all")
    parser.add_argument("--start-vertex", type=int, default=0,
                        help="vertex the DFS starts from")
    parser.add_argument("--dfs-repeat", type=int, default=1,
                        help="run DFS this many times on the same graph; visited marks are kept between runs")
    parser.add_argument("--empty-tree", action="store_true",
                        help="traverse an absent tree instead of the fixture one")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    parser.add_argument("--progress", action="store_true")
    parser.add_argument("--metrics-file", default=None,
                        help="append pickled (name, result) records of this run to the file")
    args = parser.parse_args(argv)
    if args.dfs_repeat < 1:
        parser.error("--dfs-repeat must be at least 1")
    return args


def format_result(name: str, result: Optional[List]) -> str:
    if result is None:
        return f"{name}: <empty>"
    return f"{name}: " + " ".join(str(x) for x in result)


def run_tree_traversal(method: str, args: argparse.Namespace) -> List[str]:
    tree = None if args.empty_tree else mk_fixture_tree()
    result = TREE_TRAVERSALS[method](tree)
    eprint(f"{method} produced {0 if result is None else len(result)} values",
           guard=args.verbose >= 2)
    if args.metrics_file:
        logger.log_metric(args.metrics_file, method, result)
    return [format_result(method, result)]


def run_dfs(args: argparse.Namespace) -> List[str]:
    graph = mk_fixture_graph()
    lines = []
    for attempt in range(args.dfs_repeat):
        result = graph.dfs(args.start_vertex)
        name = "dfs" if args.dfs_repeat == 1 else f"dfs#{attempt + 1}"
        eprint(f"{name} from {args.start_vertex}, visited marks: {graph.visited}",
               guard=args.verbose >= 2)
        if args.metrics_file:
            logger.log_metric(args.metrics_file, name, result)
        lines.append(format_result(name, result))
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger.init_logger({k: str(v) for k, v in vars(args).items()})
    eprint(f"Starting {logger.run_id()}", guard=args.verbose >= 1)
    if args.metrics_file:
        logger.log_run_header(args.metrics_file)

    methods = TRAVERSE_METHODS if args.traverse_method == "all" else [args.traverse_method]
    output: List[str] = []
    with tqdm(total=len(methods), unit="traversal", file=sys.stderr,
              desc="Traversals", disable=(not args.progress), leave=False) as pbar:
        for method in methods:
            if method == "dfs":
                try:
                    output.extend(run_dfs(args))
                except VertexOutOfRangeError as e:
                    eprint(f"Can't run dfs: {e}")
                    return 1
            else:
                output.extend(run_tree_traversal(method, args))
            pbar.update(1)
    for line in output:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
