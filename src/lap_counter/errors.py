class LapStoreError(Exception):
    pass

class StorageUnavailable(LapStoreError):
    '''
    The lap store cannot be opened or re-read. Fatal to the screen.
    '''

class WriteFailed(LapStoreError):
    '''
    One insert failed. The store and its observers are unaffected.
    '''

class FormatError(Exception):
    pass
