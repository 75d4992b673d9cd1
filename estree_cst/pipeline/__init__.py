"""Print result carrier and pipeline entrypoints."""

from estree_cst.pipeline.entrypoints import print_estree, print_program
from estree_cst.pipeline.result import PrintResult

__all__ = ["PrintResult", "print_estree", "print_program"]
