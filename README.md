# retromfa

Look inside an MFA file for the image signatures stored in it, and pull the first bitmap back out.

## Installation

```
pip install .
```

## Usage

```
retromfa blue.mfa
```

The command reads the file in 8-byte blocks and counts the PNG, JPEG and BMP signatures found at the start of complete blocks. It prints a summary:

```
Files found inside blue.mfa: 3
  PNG: 1
  JPEG: 1
  BMP: 1
```

It then looks for the first `BM` signature at an even offset. It reads the BMP image that starts there and writes it to `tkt.bmp` in the current directory. For each image it writes, it prints `file.type: 1`.

If no signature is found at all, or the file cannot be read, the command prints `Error reading file: ...` to standard error. It then exits with status 1.

```
retromfa -h
retromfa --help
```

These print the help text and exit with status 0. Exactly one argument is accepted. With any other number of arguments, or with an unknown option, the command prints the usage line and exits with status 1.

## Library use

```python
from retromfa.reader import scan
from retromfa.bmp import write_bmp

result = scan("blue.mfa")
print(result.count, result.png, result.jpeg, result.bmp)
for image in result.images:
    write_bmp(image, "extracted.bmp")
```

### `retromfa.reader`

- `count_signatures(path)` returns a `ScanResult` that holds the signature counts (`png`, `jpeg`, `bmp`) and their total, `count`. Its `images` field is empty.
- `read_images(path, count)` returns a list with at most one `BmpImage`. The image is the first one whose `BM` signature lies at an even offset. If that image cannot be parsed, a warning is logged and the list is empty. Nothing is read when `count` is less than 1.
- `scan(path)` combines the two. It raises `ReaderError` when no signature is found.
- `FileKind` is an integer enum with the members `NO_FILE`, `BMP` and `UNKNOWN`.

### `retromfa.bmp`

- `BmpHeader.from_bytes(data)` and `BmpHeader.to_bytes()` convert the 14-byte little-endian file header to and from bytes. The header fields are `signature`, `file_size`, `reserved1`, `reserved2` and `offset`.
- `read_bmp(stream)` reads a header from the stream's current position. It then reads `file_size - offset` bytes of pixel data, starting `offset` bytes after the header's own position. The result is a `BmpImage` with `header`, `data` and `size`.
- `write_bmp(image, path)` writes the header and then the pixel data.

### `retromfa.args`

- `parse_args(argv)` parses the arguments that follow the program name and returns an `Args(filename, help)`.
- `usage_text()` and `help_text()` return the messages the command prints.

Errors are raised as `ReaderError`, `BmpError` and `ArgumentError`.

## Limitations

- PNG and JPEG signatures are only counted. Those images are never extracted.
- At most one BMP image is extracted from a file. The command always writes it to `tkt.bmp`, and it overwrites any existing file of that name.
- Only the 14-byte BMP file header is written out, followed by the bytes from the pixel-data offset onwards. The bytes between the header and that offset are not copied.
- The MFA container format itself is not parsed. The file is only searched for signatures.

## Testing

```
pip install .[test]
pytest
```