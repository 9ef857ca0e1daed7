class ResourceNotFoundError(FileNotFoundError):
    """A manifest, noise-word list or document archive could not be read."""


class DocumentNotFoundError(FileNotFoundError):
    def __init__(self, doc_id: str) -> None:
        super().__init__(f"Document not found: {doc_id!r}")
        self.doc_id = doc_id
