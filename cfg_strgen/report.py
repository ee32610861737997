import pandas as pd

def results_to_frame(result) -> pd.DataFrame:
    '''
        Tabulates any generator result, one row per entry, sorted by length and string.

        * set / list: columns string, length (a list keeps one row per duplicate)
        * dict of counts: columns string, length, count
        * dict of derivations: columns string, length, derivations (number of paths)
    '''
    if isinstance(result, dict):
        rows = []
        for s, value in result.items():
            if isinstance(value, int):
                rows.append({"string": s, "length": len(s), "count": value})
            else:
                rows.append({"string": s, "length": len(s), "derivations": len(value)})
        columns = ["string", "length", "count"] if rows and "count" in rows[0] else ["string", "length", "derivations"]
        df = pd.DataFrame(rows, columns=columns)
    else:
        df = pd.DataFrame({"string": pd.Series(list(result), dtype=object)})
        df["length"] = df["string"].map(len)

    return df.sort_values(by=["length", "string"], kind="stable").reset_index(drop=True)

def write_csv(df: pd.DataFrame, path):
    df.to_csv(path, index=False)
    print(f"serialized {path}")
