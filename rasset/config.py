import sys, os

__all__ = ['Config', 'config']

class Config(object):
  ''' Read-only settings for the service entry points, keyed as ENV/name
  or CFG/name. Later loads override earlier ones. '''

  PREFIXS = ('ENV/','CFG/')

  def __init__(self):
    self._values = {}

  def __getitem__(self, name):
    return self._values[name]

  def __contains__(self, name):
    return name in self._values

  def __len__(self):
    return len(self._values)

  def get(self, name, default=None):
    return self._values.get(name,default)

  def get_int(self, name, default=0):
    value = self._values.get(name)
    if value is None or value == '': return default
    return int(value)

  def load_env(self, environ=None):
    # ENV_name -> ENV/name, CFG_name -> CFG/name
    if environ is None: environ = os.environ
    for (key,value) in environ.items():
      for s in self.PREFIXS:
        env_prefix = s.replace('/','_')
        if key.startswith(env_prefix):
          self._values[s + key[len(env_prefix):]] = value
          break

  def load_argv(self, argv=None):
    # -ENV name=value -CFG name=value, a bare name stores ''
    flags = dict(('-' + s.rstrip('/'),s) for s in self.PREFIXS)

    curr_prefix = ''
    for arg in (sys.argv[1:] if argv is None else argv):
      if not arg: continue
      if arg[0] == '-':
        curr_prefix = flags.get(arg,'')
      elif curr_prefix:
        (name,_,value) = arg.partition('=')
        self._values[curr_prefix + name] = value

config = Config()
