import json

import pytest

from keyphrase_eval.documents import HulthDocument


def hulth_dict(*sentences: str) -> dict:
    """Builds a Hulth-format JSON object; each sentence is a whitespace-separated string."""
    offset = 0
    out = []
    for sentence in sentences:
        tokens = []
        for word in sentence.split():
            tokens.append(
                {
                    "word": word,
                    "lemma": word.lower(),
                    "offsetBegin": offset,
                    "offsetEnd": offset + len(word),
                    "pos": "NN",
                }
            )
            offset += len(word) + 1
        out.append({"tokens": tokens})
    return {"sentences": out}


def make_document(*sentences: str) -> HulthDocument:
    return HulthDocument.from_dict(hulth_dict(*sentences))


@pytest.fixture
def write_corpus(tmp_path):
    """Writes {file name: text or list of sentences} into tmp_path/docs and returns the directory."""

    def _write(files: dict):
        directory = tmp_path / "docs"
        directory.mkdir(exist_ok=True)
        for name, sentences in files.items():
            if isinstance(sentences, str):
                sentences = [sentences]
            (directory / name).write_text(json.dumps(hulth_dict(*sentences)))
        return directory

    return _write


@pytest.fixture
def write_references(tmp_path):
    def _write(mapping: dict):
        path = tmp_path / "references.json"
        path.write_text(json.dumps(mapping))
        return path

    return _write
