import numpy as np
import pandas as pd


# add prefix to keys in a dictionary
def add_dict_prefix(x, px):
    return {'%s__%s' % (px, k) : v for k,v in x.items()}


# recursively overlay one dictionary on another
def merge_dict(base, override):
    out = dict(base)
    for k,v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = merge_dict(out[k], v)
        else:
            out[k] = v
    return out


# distinct (label, features) combinations
def distinct_rows(X, y):
    X = pd.DataFrame(X).reset_index(drop=True)
    y = pd.Series(np.asarray(y), name='__y__')
    df = pd.concat([X, y], axis=1).drop_duplicates()
    return df.drop(labels=['__y__'], axis=1), df['__y__'].to_numpy()
