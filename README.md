# litemime

Small building blocks for working with MIME data:

- **Quoted-printable** encoding and decoding (`litemime.qp`)
- **RFC 2047 encoded words** and small string helpers for header text (`litemime.text`)
- **Content type and charset detection** through the system `file` tool (`litemime.util`)

## Installation

```
pip install litemime
```

Content type detection, and therefore `text.encode_to_7bit`, needs the
`file` command on `PATH`. It is run as `file --brief --mime <path>`.

## Quoted-printable

```python
from litemime import qp

qp.decode_text("Hello=20World")            # "Hello World"
qp.decode("a_b", qp.DecodeMode.ISO, "=")   # "a b": underscores become spaces in ISO mode
qp.decode_multipart("a%41b")               # "aAb": '%' is the escape character

qp.encode("Grüße=viele", None)             # lines end with CRLF by default
qp.remove_charset_encoding("=?utf-8?q?hello?=")   # "hello"
```

The decoding and encoding functions accept `str` or `bytes` and return the
same type they were given.

While decoding:

- soft line breaks (the escape character, optional blanks, then a line
  ending) are removed;
- an escape followed by fewer than two characters ends the output;
- an escape followed by characters that are not hex digits is kept as it is,
  and a warning is logged through the `litemime.qp` logger.

`qp.decode_iso` decodes with `=` as the escape and, like `decode_text`,
leaves underscores alone; pass `DecodeMode.ISO` to `qp.decode` to turn them
into spaces.

`qp.encode` splits the input after each occurrence of the line terminator
(`lt`, CRLF when `None`), encodes every byte below 0x20, above 0x7E and `=`
as `=XX`, and ends each encoded line with the terminator. It does not insert
soft line breaks, so long lines stay long. An empty terminator raises
`ValueError`.

`qp.remove_charset_encoding` drops the `=?charset?q?` / `=?charset?b?` wrapper
and the closing `?=` of encoded words but does not decode their text.

## Header text

```python
from litemime import text
from litemime.text import EncodingType

text.strip("  hello \n")          # "hello"
text.chomp("line\r\n")            # "line"
text.is_7bit("plain ascii")       # True
text.is_8bit("Grüße")             # True

text.encode_to_7bit("Grüße", EncodingType.QP)    # "=?utf-8?q?...?="
text.encode_to_7bit("Grüße", EncodingType.B64)   # "=?utf-8?b?...?="
```

`encode_to_7bit` asks the `file` tool for the charset of the text. Text
reported as `us-ascii` is returned unchanged; otherwise an encoded word is
built with the reported charset. If the charset cannot be determined (for
example for an empty string), `ValueError` is raised.

## Detecting content types

```python
from litemime import util

util.get_mimetype("message.eml")      # e.g. "text/plain; charset=us-ascii", or None
info = util.info_from_file("message.eml")
info.mime_type, info.mime_encoding

info = util.info_from_string("Grüße")
info.mime_encoding                    # e.g. "utf-8"

util.MimeInfo.from_combined("text/plain; charset=utf-8")
```

- `get_mimetype` returns the first line of the tool's output, or `None` if
  it cannot be run or prints nothing.
- `info_from_string` writes the content to a temporary file, inspects it and
  removes the file again; it returns `None` for empty content or when nothing
  was detected.
- `MimeInfo.from_combined` (and so `info_from_file`) raises `ValueError` when
  the description has no `;` or no `=`.
- `util.random_int()` returns a random integer from 0 to `util.RAND_MAX`.

## What it does not do

litemime works on strings and single files only. It does not parse, build or
write whole MIME messages or their parts, and it has no command-line tool.

## Running the tests

```
pip install litemime[test]
pytest
```