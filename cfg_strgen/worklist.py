from collections import deque


class EmptyWorklistError(Exception):
    pass


class Boundary():
    '''
        Marks the end of one depth round in the controlled generator.
        There is a single instance, `BOUNDARY`.
    '''
    def __repr__(self):
        return "BOUNDARY"

BOUNDARY = Boundary()


class Worklist():
    '''
        FIFO of pending (item, payload) entries.
        Every insertion is kept, so duplicates are preserved.
    '''
    def __init__(self):
        self.entries = deque()

    def add(self, item, payload=1) -> bool:
        self.entries.append((item, payload))
        return True

    def take(self):
        if not self.entries:
            raise EmptyWorklistError("take() called on an empty worklist")
        return self.entries.popleft()

    def __len__(self):
        return len(self.entries)

    def __repr__(self):
        return f"{type(self).__name__}({list(self.entries)!r})"


class KeyedWorklist(Worklist):
    '''
        FIFO where at most one entry per item is pending within a depth round.
        Adding an item that is already pending in the current round calls `merge`
        instead of enqueueing it again. Adding BOUNDARY starts a new round: later
        insertions never merge into entries queued before it. Once taken, an
        item may be added again as a new entry.
    '''
    def __init__(self):
        self.entries = deque()
        self.round_entries = {}

    def merge(self, pending, payload):
        assert False, "Implement me in subclass"

    def add(self, item, payload=1) -> bool:
        if item is BOUNDARY:
            self.entries.append([item, payload])
            self.round_entries = {}
            return True
        entry = self.round_entries.get(item)
        if entry is not None:
            entry[1] = self.merge(entry[1], payload)
            return False
        entry = [item, payload]
        self.round_entries[item] = entry
        self.entries.append(entry)
        return True

    def take(self):
        if not self.entries:
            raise EmptyWorklistError("take() called on an empty worklist")
        entry = self.entries.popleft()
        item, payload = entry
        if self.round_entries.get(item) is entry:
            del self.round_entries[item]
        return item, payload


class SetWorklist(KeyedWorklist):
    # first seen wins
    def merge(self, pending, payload):
        return pending


class CountingWorklist(KeyedWorklist):
    '''
        Duplicates increase the multiplicity of the pending entry.
        `take()` returns the item together with its accumulated count.
    '''
    def merge(self, pending, payload):
        return pending + payload


class ConservativeMapWorklist(KeyedWorklist):
    '''
        Keyed by partial string, the payload is its list of derivation paths.
        Only the paths of the first insertion are kept.
    '''
    def merge(self, pending, payload):
        return pending


class AdditiveMapWorklist(KeyedWorklist):
    '''
        Keyed by partial string, the payload is its list of derivation paths.
        Paths of every insertion are concatenated, so each distinct derivation
        reaching the same intermediate string survives.
    '''
    def merge(self, pending, payload):
        return pending + payload
