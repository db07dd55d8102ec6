"""
Component and function extraction from Tree-sitter.

Walks the whole tree once, maps each binding to its shape and dispatches
it to the wrapper resolver, the component analyzer or the function
analyzer. Each bound name yields at most one record per file.
"""

import logging

from testgen_explorer.analyzer.extractors.base import BaseExtractor
from testgen_explorer.analyzer.extractors.bindings import (
    AnalysisContext,
    Binding,
    binding_from_node,
)
from testgen_explorer.analyzer.extractors.components import analyze_component, is_component
from testgen_explorer.analyzer.extractors.functions import analyze_function
from testgen_explorer.analyzer.extractors.wrappers import resolve_wrapped
from testgen_explorer.analyzer.models import FileAnalysisResult
from testgen_explorer.analyzer.tree_sitter_adapter import TreeSitterNode

logger = logging.getLogger(__name__)


class DeclarationExtractor(BaseExtractor):
    """Extracts component and function records from a Tree-sitter program.

    Imports must already be extracted into the result; they are copied
    into every record.
    """

    def extract(self, tree: TreeSitterNode, result: FileAnalysisResult) -> None:
        """Extract components and functions and append them to the result.

        Args:
            tree: Tree-sitter root node
            result: FileAnalysisResult to populate
        """
        context = AnalysisContext(file_path=result.file_path, imports=result.imports)

        bindings = [b for b in (binding_from_node(node) for node in self.walk_tree(tree)) if b is not None]
        positions = {}
        owners = {}

        # Module-scope bindings claim their names before helpers nested in bodies
        for binding in sorted(bindings, key=lambda b: not b.top_level):
            line = self.get_node_line(binding.node)
            if binding.name in context.seen_names:
                logger.debug(
                    f"Skipping {binding.name} at line {line}: "
                    f"already recorded at line {owners.get(binding.name, '?')}"
                )
                continue
            owners[binding.name] = line
            positions[binding.name] = binding.node.start_byte
            self.dispatch(binding, context)

        # Records come out in source order whatever the claiming order was
        context.components.sort(key=lambda c: positions.get(c.name, 0))
        context.functions.sort(key=lambda f: positions.get(f.name, 0))

        result.components.extend(context.components)
        result.functions.extend(context.functions)

    def dispatch(self, binding: Binding, context: AnalysisContext) -> None:
        """
        Analyze one binding and record the outcome in the context.

        Args:
            binding: Binding to analyze
            context: Per-file analysis state
        """
        logger.debug(f"Analyzing {binding.shape.value} binding {binding.name}")

        if binding.is_wrapper_call:
            # The wrapper binding owns its name even when the wrapped target
            # is a reference analyzed elsewhere
            context.claim(binding.name)
            component = resolve_wrapped(
                binding.node,
                binding.name,
                file_path=context.file_path,
                imports=context.imports,
            )
            if component is not None:
                context.components.append(component)
            return

        if is_component(binding.node):
            component = analyze_component(
                binding.node,
                name=binding.name,
                file_path=context.file_path,
                imports=context.imports,
            )
            if component is not None and context.claim(component.name):
                context.components.append(component)
            return

        function = analyze_function(
            binding.node,
            name=binding.name,
            file_path=context.file_path,
            imports=context.imports,
        )
        if function is None:
            return
        if not function.is_exported:
            logger.debug(f"Skipping non-exported function {function.name}")
            return
        if context.claim(function.name):
            context.functions.append(function)
