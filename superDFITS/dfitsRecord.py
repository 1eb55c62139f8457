## @package superDFITS
#  Record aggregator: sorts out FITS keywords from a dfits transcript.
#
#  The input is a succession of FITS headers as produced by dfits.  For each
#  file a dfitsRecord holds the file name and the value of every requested
#  keyword.  Column widths need every record, so the whole table is kept in
#  memory until render() is called.
#
#  Example:
#      dfits *.fits | fitsort BITPIX NAXIS NAXIS1 NAXIS2
#
#  FILE            BITPIX  NAXIS   NAXIS1  NAXIS2
#  image1.fits     32      2       256     256
#  image2.fits     -32     2       128     128
#

import numpy as np
from superDFITS.dfitsCard import MAGIC, MARKER
from superDFITS.dfitsErrors import *
from superDFITS.dfitsLog import *
from superDFITS.dfitsValue import *

FILE_TITLE = "FILE"

## One input file (or anonymous header) and the values found for each requested keyword
class dfitsRecord:
    _name = "dfitsRecord"
    _filename = ""
    _values = []
    _present = []

    ## The constructor.
    def __init__(self, filename, nkeys):
        if (filename is None):
            filename = ""
        self._filename = filename
        self._values = [""]*nkeys
        self._present = [False]*nkeys
    #end __init__

    def getFilename(self):
        return self._filename
    #end getFilename

    def getValue(self, kwnum):
        if (not self._present[kwnum]):
            return None
        return self._values[kwnum]
    #end getValue

    def isPresent(self, kwnum):
        return self._present[kwnum]
    #end isPresent

    def setValue(self, kwnum, value):
        self._values[kwnum] = value
        self._present[kwnum] = True
    #end setValue
#end dfitsRecord

## Documentation for dfitsTable
#
#
class dfitsTable:
    _name = "dfitsTable"
    _keywords = []
    _records = []
    _discardNext = False
    _log = None

    ## The constructor.  keywords are the requests in column order.
    def __init__(self, keywords, log=None):
        self._keywords = [str(kw).upper() for kw in keywords]
        self._records = []
        self._discardNext = False
        self._log = log
    #end __init__

    ## Column widths: filename column first, then one per keyword
    def getColumnWidths(self):
        titles = np.array([len(FILE_TITLE)]+[len(kw) for kw in self._keywords], dtype=np.int32)
        if (len(self._records) == 0):
            return titles
        lengths = np.zeros((len(self._records), len(self._keywords)+1), dtype=np.int32)
        for j in range(len(self._records)):
            rec = self._records[j]
            lengths[j,0] = len(rec.getFilename())
            for kwnum in range(len(self._keywords)):
                if (rec.isPresent(kwnum)):
                    lengths[j,kwnum+1] = len(rec.getValue(kwnum))
        return np.maximum(titles, lengths.max(0))
    #end getColumnWidths

    def getKeywords(self):
        return self._keywords
    #end getKeywords

    def getNRecords(self):
        return len(self._records)
    #end getNRecords

    def getRecords(self):
        return self._records
    #end getRecords

    ## Feed every line of an iterable (e.g. sys.stdin)
    def ingest(self, lines):
        for line in lines:
            self.ingestLine(line)
    #end ingest

    ## Feed one transcript line
    def ingestLine(self, line):
        line = line.rstrip('\r\n')
        if (self._discardNext):
            #Line after a file marker repeats SIMPLE =
            self._discardNext = False
            return
        if (line.startswith(MARKER)):
            #New file name is detected, name is the third word of the marker
            words = line.split()
            filename = ""
            if (len(words) > 2):
                filename = words[2]
            self.newRecord(filename)
            self._discardNext = True
            return
        if (line.startswith(MAGIC)):
            #New SIMPLE = entry, no associated file name
            self.newRecord("")
            return
        kwnum = findKeyword(line, self._keywords)
        if (kwnum == -1):
            return
        #Is there anything allocated yet to store this?
        if (len(self._records) == 0):
            return
        (keyword, value) = getKeywordValue(line)
        self._records[-1].setValue(kwnum, value)
    #end ingestLine

    ## Close the current record and open a new one
    def newRecord(self, filename):
        self._records.append(dfitsRecord(filename, len(self._keywords)))
        if (self._log is not None):
            self._log.writeLog(__name__, "record "+str(len(self._records))+": ["+filename+"]", verbosity=dfitsLog.VERBOSE)
        return self._records[-1]
    #end newRecord

    ## Write the table.  Raises NoInputRecords if nothing was ingested.
    def render(self, out, printHeader=True):
        if (len(self._records) == 0):
            raise NoInputRecords()
        widths = self.getColumnWidths()
        if (printHeader):
            out.write(formatRow([FILE_TITLE]+self._keywords, widths))
        for rec in self._records:
            fields = [rec.getFilename()]
            for kwnum in range(len(self._keywords)):
                if (rec.isPresent(kwnum)):
                    fields.append(rec.getValue(kwnum))
                else:
                    fields.append(" ")
            out.write(formatRow(fields, widths))
    #end render
#end dfitsTable

## Left justify each field to its width, each followed by a tab
def formatRow(fields, widths):
    s = ""
    for j in range(len(fields)):
        s += fields[j].ljust(int(widths[j]))+"\t"
    return s+"\n"
#end formatRow
