"""Formatter for Word-compatible HTML served as a legacy ``.doc`` file.

The payload is HTML tagged with the Office/Word XML namespaces, which word
processors open as a document. It is not an OOXML package.
"""

from string import Template

from audio_scribe.timestamps.models import TranscriptResult
from audio_scribe.utils.constant import DEFAULT_BASE_FILENAME

_DOC_TEMPLATE = Template(
    """
<html xmlns:o='urn:schemas-microsoft-com:office:office' xmlns:w='urn:schemas-microsoft-com:office:word' xmlns='http://www.w3.org/TR/REC-html40'>
<head>
  <meta charset='utf-8'>
  <title>$title</title>
  <style>
    body { font-family: 'Calibri', sans-serif; font-size: 11pt; line-height: 1.5; }
    p { margin-bottom: 10pt; }
  </style>
</head>
<body>
  $body
</body>
</html>"""
)


def encode_doc(
    result: TranscriptResult, title: str = DEFAULT_BASE_FILENAME, **kwargs: object
) -> bytes:
    """Convert a ``TranscriptResult`` to Word-flavoured HTML.

    Every newline in the text becomes an opening ``<p>`` tag. Paragraphs are
    never closed explicitly; HTML renderers close them implicitly.

    Args:
        result: The transcription to export.
        title: Document title, normally the export filename stem.
        **kwargs: Ignored.

    Returns:
        The HTML document encoded as UTF-8.
    """
    body = result.text.replace("\n", "<p>")
    return _DOC_TEMPLATE.substitute(title=title, body=body).encode("utf-8")
