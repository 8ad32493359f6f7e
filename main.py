"""Entry point for exporting a Visual Studio solution map to Markdown and PDF."""

from solution_map_pdf.solution_map_to_pdf import main

if __name__ == "__main__":
    raise SystemExit(main())
