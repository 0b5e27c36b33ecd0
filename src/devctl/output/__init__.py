"""Output formatting: Rich console, renderers, and output-mode dispatch."""
