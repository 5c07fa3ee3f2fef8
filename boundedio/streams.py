
class _PurePythonIOImplementationMixin:
    """Provides the parts of the io conventions that can be implemented in terms of a few core methods.

    Requires self.raw to be set, and read, readinto, readline and write to be implemented by the subclass.
    """

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __iter__(self):
        return self

    def __next__(self):
        line = self.readline()
        if not line:
            raise StopIteration()
        return line

    def close(self):
        pass  # the raw stream is owned by the caller, not by us

    @property
    def closed(self):
        return self.raw.closed

    def detach(self):
        return self.raw

    def isatty(self):
        return False

    def read1(self, size=-1):
        return self.read(size)

    def readall(self):
        return self.read(None)

    def readinto1(self, b):
        return self.readinto(b)

    def readlines(self, hint=-1):
        if hint is None or hint <= 0:
            return list(self)
        n = 0
        lines = []
        for line in self:
            lines.append(line)
            n += len(line)
            if n >= hint:
                break
        return lines

    def writelines(self, lines):
        for line in lines:
            self.write(line)
