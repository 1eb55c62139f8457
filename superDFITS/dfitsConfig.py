## @package superDFITS
#  Documentation for dfitsConfig.
#
#

import os
import xml.dom.minidom
from xml.dom.minidom import Node
from xml.parsers.expat import ExpatError
from superDFITS.dfitsErrors import *
from superDFITS.dfitsLog import *

#detect if a string contains an integer
def isInt(value):
    if (len(value) == 0):
        return False
    for j in range(len(value)):
        char = value[j]
        if (ord(char) == 45):
            if (j == 0 and len(value) > 1):
                continue
            else:
                #- only allowed on first char
                return False
        if (ord(char) < 48):
            return False
        if (ord(char) > 57):
            return False
    return True
#end isInt

## Documentation for dfitsConfig
#  Options are stored as strings, keyword requests as an ordered list.
class dfitsConfig:
    _name = "dfitsConfig"
    _options = dict() #dict of option tags
    _optioninfo = dict() #info about each option printed in printOptions
    _keywords = []

    ## The constructor.
    def __init__(self, config=None):
        #Initialize dicts
        self._options = dict()
        self._optioninfo = dict()
        self._keywords = []
        self.setDefaultOptions()
        if (config is not None):
            self.parseXML(config)
    #end __init__

    ## Append a keyword request.  Requests are compared uppercased.
    def addKeyword(self, keyword):
        self._keywords.append(str(keyword).upper())
    #end addKeyword

    def getKeywords(self):
        return self._keywords
    #end getKeywords

    ## Get an option given a name
    def getOption(self, oname):
        if (oname in self._options):
            return self._options[oname]
        return None
    #end getOption

    ## Get a yes/no option as a bool
    def getBoolOption(self, oname):
        val = self.getOption(oname)
        if (val is None):
            return False
        return (str(val).lower() == "yes")
    #end getBoolOption

    ## Get an integer option, None if unset
    def getIntOption(self, oname):
        val = self.getOption(oname)
        if (val is None or val == ""):
            return None
        if (not isInt(str(val))):
            raise ValueError("option "+oname+" must be an integer, got "+str(val))
        return int(val)
    #end getIntOption

    ## Return whether an option is defined
    def hasOption(self, oname):
        return (oname in self._options)
    #end hasOption

    ## Build a dfitsLog from the logfile and verbosity options
    def getLog(self, stream=None):
        verbosity = self.getOption("verbosity")
        if (verbosity == "silent"):
            v = dfitsLog.SILENT
        elif (verbosity == "normal"):
            v = dfitsLog.NORMAL
        elif (verbosity == "verbose"):
            v = dfitsLog.VERBOSE
        else:
            v = dfitsLog.BRIEF
        logfile = self.getOption("logfile")
        if (logfile == ""):
            logfile = None
        return dfitsLog(filename=logfile, stream=stream, verbosity=v, header=(logfile is not None))
    #end getLog

    ## Parses XML config file.  Options are <option name="" value=""/>, keywords are <keyword name=""/>
    def parseXML(self, config):
        if (not os.access(config, os.R_OK)):
            raise FileOpenError(config)
        try:
            doc = xml.dom.minidom.parse(config)
        except ExpatError as ex:
            raise dfitsError("malformed config file ["+str(config)+"]: "+str(ex))
        #get all option nodes
        optionNodes = doc.getElementsByTagName('option')
        #loop over option nodes
        for option in optionNodes:
            if (option.nodeType == Node.ELEMENT_NODE and option.nodeName == 'option'):
                if (option.hasAttribute("name") and option.hasAttribute("value")):
                    oname = str(option.getAttribute("name"))
                    oval = str(option.getAttribute("value"))
                    self._options[oname] = oval
        keywordNodes = doc.getElementsByTagName('keyword')
        for keyword in keywordNodes:
            if (keyword.nodeType == Node.ELEMENT_NODE and keyword.hasAttribute("name")):
                self.addKeyword(keyword.getAttribute("name"))
    #end parseXML

    ## Print all options with current [default] values.
    def printOptions(self, out):
        out.write("\tOptions:\n")
        for key in sorted(self._options): #sort keys alphabetically
            out.write("\t\t"+key+" = "+str(self.getOption(key))+"\n")
            #Print info if available
            if (key in self._optioninfo):
                info = str(self._optioninfo[key]).split('\n')
                out.write("\t\t\t* "+info[0]+"\n")
                for j in range(1, len(info)):
                    out.write("\t\t\t  "+info[j]+"\n")
        if (len(self._keywords) > 0):
            out.write("\tKeywords: "+" ".join(self._keywords)+"\n")
    #end printOptions

    def setDefaultOptions(self):
        self._options.setdefault("xtnum", "")
        self._optioninfo.setdefault("xtnum", "Header to print: empty for main header only,\n0 for main header + all extensions, n for main header + extension n")
        self._options.setdefault("print_header", "yes")
        self._optioninfo.setdefault("print_header", "fitsort: print the FILE/keyword title line")
        self._options.setdefault("verbosity", "brief")
        self._optioninfo.setdefault("verbosity", "silent | brief | normal | verbose")
        self._options.setdefault("logfile", "")
        self._optioninfo.setdefault("logfile", "Write log messages to this file instead of stderr")
    #end setDefaultOptions

    def setOption(self, oname, oval):
        self._options[oname] = str(oval)
    #end setOption
