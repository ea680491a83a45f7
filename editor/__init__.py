from editor.view import EditorView, ViewContainer, ViewHost

__all__ = [
    "EditorView",
    "ViewContainer",
    "ViewHost",
]
