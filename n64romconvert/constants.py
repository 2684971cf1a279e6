# Magic prefixes found at offset 0 of a cartridge image, one per on-disk
# byte ordering. All three are permutations of the same boot header word.
MAGIC_BIG_ENDIAN = b"\x80\x37\x12\x40"
MAGIC_LITTLE_ENDIAN = b"\x40\x12\x37\x80"
MAGIC_BYTE_SWAPPED = b"\x37\x80\x40\x12"

MAGIC_SIZE = 4

WORD_SIZE = 4  # bytes
CHUNK_WORDS = 256
CHUNK_SIZE = WORD_SIZE * CHUNK_WORDS  # bytes

VERSION = "0.2.0"
