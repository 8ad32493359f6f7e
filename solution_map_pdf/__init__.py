"""Export a Visual Studio solution's dependencies and sources to Markdown and PDF."""
