"""
Entry point and compatibility facade for the document editor.

Packages:
- doceditor.docs: Element types and the Document container
- doceditor.storage: Persistence backends (file, db placeholder, docx export)
- doceditor.editor: DocumentEditor facade
- doceditor.config: JSON configuration loader
"""

from __future__ import annotations

from typing import List, Optional

from doceditor.config import CONFIG_PATH, EditorConfig, load_config
from doceditor.docs import (
    Document,
    ImageElement,
    NewLineElement,
    TabSpaceElement,
    TextElement,
)
from doceditor.editor import DocumentEditor
from doceditor.storage import (
    DBStorage,
    DocxStorage,
    FileStorage,
    Persistence,
    SaveResult,
    SaveStatus,
    STORAGE_KINDS,
    create_storage,
)

__all__ = [
    # config
    "CONFIG_PATH",
    "EditorConfig",
    "load_config",
    # model
    "Document",
    "TextElement",
    "ImageElement",
    "NewLineElement",
    "TabSpaceElement",
    # storage
    "Persistence",
    "FileStorage",
    "DBStorage",
    "DocxStorage",
    "SaveResult",
    "SaveStatus",
    "STORAGE_KINDS",
    "create_storage",
    # editor
    "DocumentEditor",
    "build_sample_document",
]


def build_sample_document(editor: DocumentEditor) -> DocumentEditor:
    """Fill `editor` with the demonstration document and return it."""
    editor.add_text("Hello, world!")
    editor.add_new_line()
    editor.add_text("This is a real-world document editor example.")
    editor.add_new_line()
    editor.add_tab_space()
    editor.add_text("Indented text after a tab space.")
    editor.add_new_line()
    editor.add_image("picture.jpg")
    return editor


def _cli(argv: Optional[List[str]] = None) -> None:
    """CLI demonstrating the editor.

    --config / -c: Path to editor.json (default: config/editor.json)
    --storage / -s: Storage backend: file|db|docx (overrides config)
    --out / -o: Output path for file/docx backends (overrides config)
    --encoding: Text encoding for the file backend (overrides config)
    --no-save: Only print the rendered document
    """
    import argparse

    parser = argparse.ArgumentParser(description="Build a sample document, print it and save it.")
    parser.add_argument("--config", "-c", type=str, default=CONFIG_PATH, help="Path to editor config JSON (default: config/editor.json)")
    parser.add_argument("--storage", "-s", type=str, choices=list(STORAGE_KINDS), help="Storage backend (default: from config)")
    parser.add_argument("--out", "-o", type=str, help="Output path for file/docx storage (default: from config)")
    parser.add_argument("--encoding", type=str, help="Text encoding for file storage (default: platform default)")
    parser.add_argument("--no-save", action="store_true", help="Print the rendered document without saving it")

    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config)
    except ValueError as e:
        print(f"Error: {e}")
        raise SystemExit(2)

    kind = args.storage or cfg.storage
    out_path = args.out
    if out_path is None and kind == cfg.storage:
        out_path = cfg.output_path
    storage = create_storage(kind, path=out_path, encoding=args.encoding or cfg.encoding)

    editor = build_sample_document(DocumentEditor(Document(), storage))
    print(editor.render_document())

    if args.no_save:
        return

    result = editor.save_document()
    print(result.message())
    if result.status is SaveStatus.FAILED:
        raise SystemExit(1)


if __name__ == "__main__":
    _cli()
