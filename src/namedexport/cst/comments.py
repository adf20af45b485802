"""Comment ownership across node replacement."""

from namedexport.cst.nodes import Module, Statement


def transfer_comments(old: Statement, new: Statement) -> None:
    """Move comments and surrounding layout from ``old`` to ``new``.

    ``old`` is left without comments, so a node that is reused inside its
    replacement (e.g. the declaration wrapped by a named export) never prints
    its comments twice.
    """
    new.comments = old.comments
    new.gap = old.gap
    old.comments = []
    old.gap = ""


def replace_with_comments(module: Module, old: Statement, new: Statement) -> Statement:
    """Replace ``old`` with ``new`` in ``module``, handing over its comments."""
    transfer_comments(old, new)
    module.replace(old, new)
    return new
