from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

from keyphrase_eval.documents import Document, HulthDocument
from keyphrase_eval.errors import DocumentFormatError


def iter_document_files(directory: str | Path) -> Iterator[Path]:
    """Yields every non-directory entry of ``directory`` (non-recursive), sorted by name."""
    for path in sorted(Path(directory).iterdir()):
        if path.is_dir():
            continue
        yield path


def load_document(path: str | Path) -> HulthDocument:
    """Reads and parses one Hulth JSON document. Parse errors name the offending file."""
    path = Path(path)
    data = path.read_bytes()
    try:
        return HulthDocument.from_json(data)
    except DocumentFormatError as e:
        raise DocumentFormatError(f"{path}: {e}") from e


class Corpus:
    """
    An ordered, immutable collection of documents fitted together by one TF-IDF model.

    Args:
        documents (list[Document]): Documents in load order.
        names (list[str] | None): Optional source names (file names) aligned with ``documents``.

    Attributes:
        documents (tuple[Document, ...]): The documents.
        document_count (int): Total number of documents in the corpus.
        names (tuple[str, ...] | None): Source names, if known.
    """

    def __init__(self, documents: list[Document], names: list[str] | None = None):
        if names is not None and len(names) != len(documents):
            raise ValueError("names must align with documents")
        self.documents = tuple(documents)
        self.document_count = len(self.documents)
        self.names = tuple(names) if names is not None else None

    def __len__(self) -> int:
        return self.document_count

    def __getitem__(self, index: int) -> Document:
        return self.documents[index]

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents)

    def items(self) -> Iterator[tuple[str, Document]]:
        """Pairs of (source name, document); falls back to ``get_id`` when names are unknown."""
        if self.names is None:
            return ((doc.get_id(), doc) for doc in self.documents)
        return zip(self.names, self.documents)

    @classmethod
    def from_directory(
        cls,
        directory: str | Path,
        loader: Callable[[Path], Document] = load_document,
    ) -> "Corpus":
        """
        Loads every file in ``directory`` as a document.

        Any read or parse failure aborts the whole load; no partial corpus is returned.
        """
        documents = []
        names = []
        for path in iter_document_files(directory):
            documents.append(loader(path))
            names.append(path.name)
        return cls(documents, names)
