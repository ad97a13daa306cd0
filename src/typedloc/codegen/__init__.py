"""Python source synthesis for the generated translation package.

Submodules:
    naming    - NamingScheme (class, module, and function names)
    templates - string.Template skeletons and render()
    hierarchy - GeneratedClass, class synthesis, language modules
    dispatch  - DispatchTable, aggregate module, package __init__

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from typedloc.codegen.dispatch import (
    DispatchEntry,
    DispatchTable,
    build_dispatch_table,
    render_aggregate_module,
    render_package_init,
)
from typedloc.codegen.hierarchy import (
    GeneratedClass,
    render_language_module,
    resolve_member,
    synthesize_class,
    synthesize_hierarchy,
)
from typedloc.codegen.naming import NamingScheme

__all__ = [
    # Naming
    "NamingScheme",
    # Hierarchy
    "GeneratedClass",
    "synthesize_class",
    "synthesize_hierarchy",
    "resolve_member",
    "render_language_module",
    # Dispatch
    "DispatchEntry",
    "DispatchTable",
    "build_dispatch_table",
    "render_aggregate_module",
    "render_package_init",
]
