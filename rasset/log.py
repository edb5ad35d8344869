import sys

__all__ = ['Logger', 'logger']

LOG_LEVEL_PROTOCOL = 0
LOG_LEVEL_DEBUG    = 1
LOG_LEVEL_INFO     = 2
LOG_LEVEL_ERROR    = 3
LOG_LEVEL_FATAL    = 4

_LEVEL_NAMES = {
  'protocol': LOG_LEVEL_PROTOCOL,
  'debug': LOG_LEVEL_DEBUG,
  'info': LOG_LEVEL_INFO,
  'error': LOG_LEVEL_ERROR,
  'fatal': LOG_LEVEL_FATAL,
}

def level_from_name(name, default=LOG_LEVEL_ERROR):
  if name is None: return default
  s = str(name).strip().lower()
  if s.isdigit(): return int(s)
  return _LEVEL_NAMES.get(s,default)

class Logger(object):
  def __init__(self, source, log=sys.stdout, log_level=LOG_LEVEL_ERROR):
    self._source = source
    self._log = log
    self._log_level = log_level
  
  source = property(lambda s: s._source)
  
  def _get_log_level(self):
    return self._log_level
  def _set_log_level(self, log_level):
    self._log_level = log_level
  log_level = property(_get_log_level,_set_log_level)
  
  def _get_stream(self):
    return self._log
  def _set_stream(self, log):
    self._log = log    # None disables output
  stream = property(_get_stream,_set_stream)
  
  def log(self, message, level=LOG_LEVEL_INFO):
    if self._log is None or level < self._log_level: return
    print('(%s) %s' % (self._source,message),file=self._log)

logger = Logger('rasset')
