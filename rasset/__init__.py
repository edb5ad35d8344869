__version__ = '0.1.0'

class TransferError(Exception): pass

class ConstructionError(TransferError, ValueError): pass
class UnderflowError(TransferError, ArithmeticError): pass
class CapacityError(TransferError, ValueError): pass
class DecodeError(TransferError, ValueError): pass
