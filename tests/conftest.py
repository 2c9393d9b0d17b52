import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import plainpdf
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


class FakeMetrics:
    """
    Deterministic metrics: every character is char_units wide and every
    font has the same bounding box.

    At size 10 the defaults give 10pt per character and a 14pt line.
    """

    def __init__(self, char_units: float = 1000.0, bbox_height: float = 1400.0):
        self.char_units = char_units
        self.bbox_height = bbox_height
        self.width_calls = 0
        self.fail_on = None  # text whose measurement raises

    def string_width(self, font, text):
        self.width_calls += 1
        if self.fail_on is not None and self.fail_on in text:
            raise KeyError(f"no metrics for {text!r}")
        return len(text) * self.char_units

    def bounding_box_height(self, font):
        return self.bbox_height


class RecordingStream:
    """Content stream that appends every call to a shared event log."""

    def __init__(self, sink, page):
        self.sink = sink
        self.page = page
        self.x = 0.0
        self.y = 0.0
        self.font = None
        self.in_text = False
        self.closed = False

    def begin_text_block(self):
        self.in_text = True
        self.x = self.y = 0.0
        self.sink.events.append(("begin", self.page))

    def set_font(self, font, size):
        self.font = (font, size)
        self.sink.events.append(("font", self.page, font, size))

    def move_cursor_by(self, dx, dy):
        self.x += dx
        self.y += dy
        self.sink.events.append(("move", self.page, dx, dy))

    def draw(self, text):
        if self.sink.fail_on_draw is not None and self.sink.fail_on_draw in text:
            raise OSError("disk full")
        self.sink.events.append(("draw", self.page, text))
        self.sink.draws.append((self.page, text, self.x, self.y, self.font))

    def end_text_block(self):
        self.in_text = False
        self.sink.events.append(("end", self.page))

    def close(self):
        self.closed = True
        self.sink.events.append(("close", self.page))


class RecordingDocument:
    def __init__(self, sink):
        self.sink = sink
        self.saved_to = None

    def save(self, path):
        if self.sink.fail_on_save:
            raise OSError("read-only file system")
        self.saved_to = path
        self.sink.events.append(("save", path))


class RecordingSink:
    """DocumentSink recording pages, streams and draws for assertions."""

    def __init__(self):
        self.events = []
        self.draws = []  # (page, text, x, y, (font, size))
        self.streams = []
        self.pages = 0
        self.doc = None
        self.fail_on_draw = None
        self.fail_on_save = False

    def new_document(self):
        self.doc = RecordingDocument(self)
        self.pages = 1
        return self.doc, 0

    def new_page(self, doc):
        assert doc is self.doc
        self.pages += 1
        self.events.append(("page", self.pages - 1))
        return self.pages - 1

    def open_stream(self, doc, page):
        assert doc is self.doc
        stream = RecordingStream(self, page)
        self.streams.append(stream)
        return stream


# Common test fixtures
@pytest.fixture
def fake_metrics():
    """Metrics with 10pt characters and 14pt lines at size 10."""
    return FakeMetrics()


@pytest.fixture
def recording_sink():
    """Sink that records every collaborator call."""
    return RecordingSink()
