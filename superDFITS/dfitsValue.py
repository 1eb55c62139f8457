## @package superDFITS
#  Keyword/value extraction and keyword matching for single cards.
#

from superDFITS.dfitsCard import CARD_LENGTH

HIERARCH = "HIERARCH ESO"

## Keyword of a card: text up to the first '=' with trailing blanks removed.
#  A card without '=' returns None.
def getKeyword(card):
    eq = card.find('=')
    if (eq == -1):
        return None
    return card[:eq].rstrip(' ')
#end getKeyword

## Return (keyword, value) of a card.
#  String values are returned exactly as found between the first and the last quote,
#  other values are the first blank delimited token.  No complex value is recognized.
def getKeywordValue(card):
    eq = card.find('=')
    if (eq == -1):
        raise ValueError("card has no '=': "+card)
    keyword = card[:eq].rstrip(' ')
    #Transcript lines are right stripped, pad back to a full card
    card = card.ljust(CARD_LENGTH)
    quote = False
    tmp = []
    #Copy the line till an unquoted slash or the end of the card
    for c in range(eq+1, CARD_LENGTH):
        if (card[c] == '/' and not quote):
            break
        if (card[c] == '\''):
            quote = not quote
        tmp.append(card[c])
    tmp = "".join(tmp)

    begin = tmp.find('\'')
    if (begin != -1):
        #A quote has been found: it is a string value
        end = tmp.rfind('\'')
        return (keyword, tmp[begin+1:end])
    #No quote, just get the value
    words = tmp.split()
    if (len(words) == 0):
        return (keyword, "")
    return (keyword, words[0])
#end getKeywordValue

## From a hierarchical keyword in format A.B.C expand to HIERARCH ESO A B C
#  A leading ESO segment is already part of the prefix: ESO.TEL.AIRM and TEL.AIRM
#  both give HIERARCH ESO TEL AIRM.
def expandHierarchKeyword(dotkey):
    tokens = [token for token in dotkey.split('.') if token != '']
    if (len(tokens) > 1 and tokens[0] == "ESO"):
        tokens = tokens[1:]
    return " ".join([HIERARCH]+tokens)
#end expandHierarchKeyword

def isHierarchRequest(keyword):
    return (keyword.find('.') != -1)
#end isHierarchRequest

## Does the card keyword match a requested keyword?
def matchKeyword(cardKeyword, requested):
    if (cardKeyword is None):
        return False
    if (isHierarchRequest(requested)):
        return (cardKeyword == expandHierarchKeyword(requested.upper()))
    return (cardKeyword.upper() == requested.upper())
#end matchKeyword

## Rank of the first requested keyword found in a card, -1 if none.
def findKeyword(card, keywords):
    kw = getKeyword(card)
    if (kw is None):
        return -1
    for j in range(len(keywords)):
        if (matchKeyword(kw, keywords[j])):
            return j
    return -1
#end findKeyword
