# topmark:header:start
#
#   project      : LineSort
#   file         : pipelines.py
#   file_relpath : src/linesort/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named pipeline variants for LineSort (immutable, typed step sequences).

Overview
--------
- ``PREPARE``: load → split (failures always terminal; no output is touched)
- ``EMIT``: write(unsorted) → sort(forward) → write → sort(suffix) → write
- ``SORT``: PREPARE + EMIT, the complete run

Mermaid (orientation)
---------------------
```mermaid
flowchart LR
  subgraph Prepare
    L[loader] --> S[splitter]
  end
  subgraph Emit
    S --> W1[writer: unsorted] --> F[sorter: forward] --> W2[writer: forward]
    W2 --> R[sorter: suffix] --> W3[writer: suffix]
  end
```

Notes:
* The engine opens the output between ``PREPARE`` and ``EMIT`` so a failed load
  never truncates an existing output file.
"""

from __future__ import annotations

from typing import Final

from linesort.pipeline.protocols import Step
from linesort.text.compare import Ordering

from .steps import loader, sorter, splitter, writer

PREPARE_PIPELINE: Final[tuple[Step, ...]] = (
    loader.LoaderStep(),  # Read the whole input file
    splitter.SplitterStep(),  # Split the buffer into line views
)

EMIT_PIPELINE: Final[tuple[Step, ...]] = (
    writer.WriterStep("unsorted"),
    sorter.SorterStep(Ordering.FORWARD),
    writer.WriterStep(Ordering.FORWARD.value),
    sorter.SorterStep(Ordering.SUFFIX),
    writer.WriterStep(Ordering.SUFFIX.value),
)

SORT_PIPELINE: Final[tuple[Step, ...]] = PREPARE_PIPELINE + EMIT_PIPELINE


PIPELINES: Final[dict[str, tuple[Step, ...]]] = {
    "prepare": PREPARE_PIPELINE,
    "emit": EMIT_PIPELINE,
    "sort": SORT_PIPELINE,
}


def get_pipeline(name: str) -> tuple[Step, ...]:
    """Return the pipeline registered under ``name``.

    Raises:
        KeyError: If no pipeline has that name.
    """
    return PIPELINES[name]
