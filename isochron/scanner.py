#! /usr/bin/env python
"""A simple character scanner used to build the ISO 8601 parsers"""

from .errors import InvalidFormat


class ScannerError(InvalidFormat):

    """Raised by :class:`BasicParser` when the input doesn't match

    production
        A short description of what was expected, e.g., "end of time",
        or None if nothing in particular was expected.

    scanner
        The :class:`BasicParser` that failed (optional).  If given, the
        error records the failing position and the text either side of
        it.

    As an :class:`isochron.errors.InvalidFormat` the error can be
    caught along with all the other format errors."""

    #: the number of characters of context kept either side of pos
    context = 40

    def __init__(self, production, scanner=None):
        self.production = production
        if scanner is None:
            self.pos = self.left = self.right = None
            where = ""
        else:
            #: the index into the source at which scanning failed
            self.pos = scanner.pos
            #: the source text preceding pos
            self.left = scanner.src[max(0, self.pos - self.context):self.pos]
            #: the source text from pos onwards
            self.right = scanner.src[self.pos:self.pos + self.context]
            where = " at [%i] in %r" % (self.pos, scanner.src)
        if production:
            msg = "expected %s%s" % (production, where)
        else:
            msg = "unexpected input%s" % where
        super(ScannerError, self).__init__(msg)


class BasicParser(object):

    r"""Scans a string one character at a time

    source
        The text to scan, bytes are not accepted.

    The scanner keeps a current position, :attr:`pos`, and the
    character found there, :attr:`the_char`.  Its methods come in three
    flavours:

    match\_*
        Look ahead without moving, returning True or False.

    parse\_*
        Consume the item and return it, or return None (and stay put)
        if it isn't there.

    require\_*
        Consume the item or raise an error: :class:`ScannerError` for
        mismatched syntax, subclasses may raise the more specific
        errors in :mod:`isochron.errors`.

    Derived classes add the require\_* methods for their grammar."""

    digits = "0123456789"

    def __init__(self, source):
        if not isinstance(source, str):
            raise TypeError("expected str, not %s" % repr(source))
        #: the text being scanned
        self.src = source
        #: the index of the current character
        self.pos = -1
        #: the current character, None once the end is reached
        self.the_char = None
        self.next_char()

    def setpos(self, new_pos):
        """Moves to *new_pos*, a value previously read from :attr:`pos`"""
        self.pos = new_pos - 1
        self.next_char()

    def next_char(self):
        """Advances one character"""
        self.pos += 1
        if 0 <= self.pos < len(self.src):
            self.the_char = self.src[self.pos]
        else:
            self.the_char = None

    def parser_error(self, production=None):
        """Raises :class:`ScannerError` for the current position"""
        raise ScannerError(production, self)

    def match_end(self):
        return self.the_char is None

    def require_end(self, production='end'):
        """Raises :class:`ScannerError` unless all input is consumed"""
        if self.the_char is not None:
            self.parser_error(production)

    def match(self, match_string):
        """True if the input continues with *match_string*"""
        return (self.the_char is not None and
                self.src.startswith(match_string, self.pos))

    def parse(self, match_string):
        """Consumes *match_string*, returning it, or returns None"""
        if not self.match(match_string):
            return None
        self.setpos(self.pos + len(match_string))
        return match_string

    def match_one(self, match_chars):
        """True if the current character is one of *match_chars*"""
        return self.the_char is not None and self.the_char in match_chars

    def parse_one(self, match_chars):
        """Consumes and returns one of *match_chars*, or returns None"""
        result = self.the_char
        if not self.match_one(match_chars):
            return None
        self.next_char()
        return result

    def match_digit(self):
        return self.match_one(self.digits)

    def parse_digit(self):
        return self.parse_one(self.digits)

    def parse_digits(self, min, max=None):
        """Consumes a run of ASCII digits, returning them as a string

        min
            The fewest digits acceptable, 0 allows an empty result.

        max
            The most digits to consume, None for no limit.

        If there are fewer than *min* digits None is returned and
        nothing is consumed."""
        if min < 0 or (max is not None and min > max):
            raise ValueError("0 <= min <= max required")
        start = self.pos
        while max is None or self.pos - start < max:
            if self.parse_digit() is None:
                break
        if self.pos - start < min:
            self.setpos(start)
            return None
        return self.src[start:self.pos]
