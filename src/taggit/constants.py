PROJECT = 'taggit'

# Machine readable record framing
ASCII_STX = '\x02'  # start of text, separates a field name from its value
ASCII_ETX = '\x03'  # end of text, introduces the next field

OUTPUT_FORMATS = ['human', 'machine', 'json']

LOG_LEVELS = ['debug', 'info', 'warning', 'error', 'critical']
