'''
    Collectors receive terminal strings from the generator together with the
    payload their worklist entry carried (a multiplicity or a list of paths).
'''

class UniqueCollector():
    def __init__(self):
        self.strings = set()

    def add(self, s: str, payload):
        self.strings.add(s)

    def result(self) -> set[str]:
        return self.strings


class ListCollector():
    def __init__(self):
        self.strings = []

    def add(self, s: str, payload):
        self.strings.append(s)

    def result(self) -> list[str]:
        return self.strings


class CountCollector():
    def __init__(self):
        self.counts = {}

    def add(self, s: str, count: int):
        self.counts[s] = self.counts.get(s, 0) + count

    def result(self) -> dict[str, int]:
        return self.counts


class DerivationCollector():
    '''
        Maps each terminal string to its derivations, each one a list of
        rewrite records. With `additive`, paths of every arrival are kept,
        otherwise only the paths of the first arrival.
    '''
    def __init__(self, additive: bool):
        self.additive = additive
        self.derivations = {}

    def add(self, s: str, paths):
        paths = [list(path) for path in paths]
        if s not in self.derivations:
            self.derivations[s] = paths
        elif self.additive:
            self.derivations[s].extend(paths)

    def result(self) -> dict[str, list[list]]:
        return self.derivations
