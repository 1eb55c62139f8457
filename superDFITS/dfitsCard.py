## @package superDFITS
#  Card reader: fixed 80 character header records and the
#  main header / extension traversal that produces the dfits transcript.
#

from superDFITS.dfitsErrors import *
from superDFITS.dfitsLog import *

#constants
CARD_LENGTH = 80
MAGIC = "SIMPLE  ="
MARKER = "====>"
FILE_MARKER = MARKER+" file %s (main) <===="
XTENSION_MARKER = MARKER+" xtension %d"

#extension selectors
MAIN_ONLY = None
ALL_EXTENSIONS = 0

## Read one card from a byte (or text) stream.
#  Returns None at end of stream, raises ReadError on a partial card.
def readCard(stream):
    buf = stream.read(CARD_LENGTH)
    if (buf is None or len(buf) == 0):
        return None
    if (len(buf) != CARD_LENGTH):
        raise ReadError("error reading input: partial card of "+str(len(buf))+" bytes")
    if (isinstance(buf, bytes)):
        buf = buf.decode('latin-1')
    return buf
#end readCard

## Strip off blank characters from the right side of a card
def rstripCard(card):
    return card.rstrip(' ')
#end rstripCard

def isEndCard(card):
    return card[:3] == "END"
#end isEndCard

def isXtensionCard(card):
    return card[:8] == "XTENSION"
#end isXtensionCard

def isMagic(card):
    return card[:len(MAGIC)] == MAGIC
#end isMagic

## Documentation for dfitsCardReader
#
#  Walks the main header and extension headers of one input stream.
#  xtnum selects what is emitted:
#    None (MAIN_ONLY) - main header only
#    < 0              - nothing
#    0                - main header and every extension
#    n >= 1           - main header and extension n only, stops after its END card
class dfitsCardReader:
    _name = "dfitsCardReader"
    ##Static vars
    MAIN_HEADER = 0
    SCANNING_FOR_EXTENSION = 1
    IN_EXTENSION = 2
    DONE = 3

    _stream = None
    _xtnum = MAIN_ONLY
    _state = MAIN_HEADER
    _nxt = 0 #extensions found so far
    _ncards = 0 #cards read so far
    _log = None

    ## The constructor.
    def __init__(self, stream, xtnum=MAIN_ONLY, log=None):
        self._stream = stream
        self._xtnum = xtnum
        self._state = self.MAIN_HEADER
        self._nxt = 0
        self._ncards = 0
        self._log = log
    #end __init__

    def getExtension(self):
        return self._nxt
    #end getExtension

    def getNCards(self):
        return self._ncards
    #end getNCards

    def getState(self):
        return self._state
    #end getState

    ## Read the next card and keep count
    def nextCard(self):
        card = readCard(self._stream)
        if (card is not None):
            self._ncards += 1
        return card
    #end nextCard

    ## Generator over transcript lines (right stripped cards and extension markers, no newlines)
    def headerLines(self):
        #Try getting the first 80 chars
        card = self.nextCard()
        if (card is None):
            raise ReadError()
        #Check that it is indeed FITS
        if (not isMagic(card)):
            raise NotFitsFormat()
        xtnum = self._xtnum
        if (xtnum is not None and xtnum < 0):
            self._state = self.DONE
            return

        #Output main header
        yield rstripCard(card)
        while (not isEndCard(card)):
            card = self.nextCard()
            if (card is None):
                raise ReadError("error reading input: no END card in main header")
            yield rstripCard(card)
        if (xtnum is None):
            self._state = self.DONE
            return

        self._state = self.SCANNING_FOR_EXTENSION
        while (self._state != self.DONE):
            #Look for next XTENSION keyword
            card = self.nextCard()
            if (card is None):
                #Nothing more to read
                self._state = self.DONE
                break
            if (not isXtensionCard(card)):
                continue
            self._nxt += 1
            self._state = self.IN_EXTENSION
            requested = (xtnum == ALL_EXTENSIONS or xtnum == self._nxt)
            if (self._log is not None):
                self._log.writeLog(__name__, "found extension "+str(self._nxt)+" after "+str(self._ncards-1)+" cards", verbosity=dfitsLog.VERBOSE)
            if (requested):
                yield XTENSION_MARKER % (self._nxt)
                yield rstripCard(card)
            while (not isEndCard(card)):
                card = self.nextCard()
                if (card is None):
                    self._state = self.DONE
                    return
                if (requested):
                    yield rstripCard(card)
            if (xtnum == self._nxt):
                #Requested extension done, leave the rest unread
                self._state = self.DONE
            else:
                self._state = self.SCANNING_FOR_EXTENSION
    #end headerLines
#end dfitsCardReader

## Write the transcript of one stream to out.
#  When name is given a file marker goes before the first card, once it has passed the magic check.
def dumpFits(stream, out, xtnum=MAIN_ONLY, name=None, log=None):
    reader = dfitsCardReader(stream, xtnum=xtnum, log=log)
    marker = (name is not None)
    for line in reader.headerLines():
        if (marker):
            out.write(FILE_MARKER % (name)+"\n")
            marker = False
        out.write(line+"\n")
    return reader
#end dumpFits
