"""UI components, flow layout, colours, vectors and render commands."""

__version__ = "0.1.0"