from collections import namedtuple

import numpy as np
import pandas as pd

from sklearn.metrics import confusion_matrix

from .errors import ScoringError

Evaluation = namedtuple('Evaluation', ['name', 'model', 'confusion', 'rate'])

# label domain fixed ahead of time so the table is always 2x2
labels = (0, 1)


# confusion matrix with true labels as rows and predictions as columns
def confusion_table(y_true, y_pred, labels=labels):
    y_true, y_pred = np.asarray(y_true).astype(int), np.asarray(y_pred).astype(int)
    if len(y_true) != len(y_pred):
        raise ScoringError('Got %d true labels but %d predictions' % (len(y_true), len(y_pred)))
    if len(y_true) == 0:
        cm = np.zeros((len(labels), len(labels)), dtype=int)
    else:
        cm = confusion_matrix(y_true, y_pred, labels=list(labels))
    return pd.DataFrame(cm, index=pd.Index(labels, name='true'),
                        columns=pd.Index(labels, name='predicted'))


# 1 - (diagonal / total)
def misclassification_rate(table):
    cm = np.asarray(table)
    total = cm.sum()
    if total == 0:
        raise ScoringError('Cannot compute a misclassification rate over zero records')
    return float(1 - np.trace(cm) / total)


def score_model(name, model, X, y):
    table = confusion_table(y, model.predict(X))
    return Evaluation(name, model, table, misclassification_rate(table))
