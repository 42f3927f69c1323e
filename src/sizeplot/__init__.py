"""sizeplot: file size distribution summaries and terminal box-plots."""

__version__ = "0.1.0"
