import logging
import os

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

logger = logging.getLogger(__name__)


# conditional probability tables of a fitted naive bayes variant, one panel per feature
def plot_naive_bayes(model, path):
    pipeline = model.estimator_
    enc, nb = pipeline.named_steps['enc'], pipeline.steps[-1][-1]

    n_feat = len(enc.transformers_)
    fig, axes = plt.subplots(n_feat, 1, figsize=(10, 3 * n_feat), squeeze=False)

    for ax, (column, trans), log_prob in zip(axes[:, 0], enc.transformers_, nb.feature_log_prob_):
        categories = trans.classes[:log_prob.shape[1]]
        x = np.arange(log_prob.shape[1])
        width = 0.8 / len(nb.classes_)
        for j, cls in enumerate(nb.classes_):
            ax.bar(x + j * width, np.exp(log_prob[j]), width=width, label='long_stay=%s' % cls)

        ax.set_title(column)
        ax.set_ylabel('P(level | class)')
        # DRG codes are too many to label individually
        if len(categories) == len(x) <= 20:
            ax.set_xticks(x + width * (len(nb.classes_) - 1) / 2)
            ax.set_xticklabels(categories)
        else:
            ax.set_xlabel('%d levels' % len(x))
        ax.legend(loc='upper right')

    fig.tight_layout()
    dirname = os.path.dirname(path)
    if dirname:
        os.makedirs(dirname, exist_ok=True)
    fig.savefig(path, dpi=150)
    plt.close(fig)

    logger.info('Saved naive bayes plot to %s', path)
    return path
