"""Response text extraction

The Responses API returns text in different places depending on what the
model produced. A response is parsed into a list of known text shapes and
the first non-empty one, by precedence, is returned:

1. AggregatedText      - top-level `output_text`
2. OutputItemText      - an `output` item of type `output_text`
3. MessageContentText  - an `output_text` entry inside a `message` item
"""
from dataclasses import dataclass
from typing import List, Optional, Union

from errors import EmptyResponseError, NoTextError

OUTPUT_TEXT_TYPE = "output_text"
MESSAGE_TYPE = "message"


@dataclass(frozen=True)
class AggregatedText:
    text: str
    precedence = 0


@dataclass(frozen=True)
class OutputItemText:
    text: str
    precedence = 1


@dataclass(frozen=True)
class MessageContentText:
    text: str
    precedence = 2


TextShape = Union[AggregatedText, OutputItemText, MessageContentText]


def extract_text(response) -> str:
    """Return the trimmed answer text from a Responses API result

    Raises:
        EmptyResponseError: if there is no response at all
        NoTextError: if no shape carries non-empty text
    """
    if response is None:
        raise EmptyResponseError("Empty response from OpenAI")

    shapes = sorted(parse_shapes(response), key=lambda shape: shape.precedence)
    if not shapes:
        raise NoTextError("No text output returned from OpenAI response")
    return shapes[0].text


def parse_shapes(response) -> List[TextShape]:
    """Collect every non-empty text shape in document order"""
    shapes: List[TextShape] = []

    aggregated = _clean(_field(response, 'output_text'))
    if aggregated:
        shapes.append(AggregatedText(aggregated))

    output = _field(response, 'output')
    for item in output if isinstance(output, (list, tuple)) else []:
        item_type = _field(item, 'type')
        if item_type == OUTPUT_TEXT_TYPE:
            text = _text_value(_field(item, 'text'))
            if text:
                shapes.append(OutputItemText(text))
        elif item_type == MESSAGE_TYPE:
            shapes.extend(MessageContentText(text) for text in _message_texts(item))

    return shapes


def _message_texts(item) -> List[str]:
    content = _field(item, 'content')
    texts = []
    for entry in content if isinstance(content, (list, tuple)) else []:
        if _field(entry, 'type') != OUTPUT_TEXT_TYPE:
            continue
        text = _text_value(_field(entry, 'text'))
        if text:
            texts.append(text)
    return texts


def _text_value(value) -> Optional[str]:
    """Text is either a plain string or an object carrying `value`"""
    if isinstance(value, str):
        return _clean(value)
    return _clean(_field(value, 'value'))


def _clean(value) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _field(obj, name: str):
    """Read a field from an SDK model or a plain dict"""
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)
