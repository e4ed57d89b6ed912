__author__ = 'robert'

#Constants
#Opening character of a block -> the character closing it.
BLOCK_DELIMITERS = {"<": ">", '"': '"'}

#Statement terminator, outside of a block
STATEMENT_TERMINATOR = "."


def is_statement_boundary(char):
    return char == STATEMENT_TERMINATOR


def is_token_boundary(char):
    return char.isspace() or char == STATEMENT_TERMINATOR


class BlockScanner:
    """
    Tracks whether the scan position is inside a block (an URI in angle brackets or a quoted literal).
    Characters inside a block are content and never act as a boundary, whatever their value.
    """

    def __init__(self, is_boundary, delimiters=BLOCK_DELIMITERS):
        """
        :param is_boundary: predicate deciding if a character outside of a block splits the input
        :param delimiters: map of block opening characters to their closing characters
        """
        self.is_boundary = is_boundary
        self.delimiters = delimiters
        self.delimiter = None

    @property
    def in_block(self):
        return self.delimiter is not None

    def feed(self, char):
        """
        Advances the scanner by one character.
        :param char: the next character
        :return: True if the character is a valid split point
        """
        if self.delimiter is None:
            if char in self.delimiters:
                self.delimiter = self.delimiters[char]
                return False
            return self.is_boundary(char)

        if char == self.delimiter:
            self.delimiter = None
        return False

    def reset(self):
        self.delimiter = None
