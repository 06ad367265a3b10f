from .errors import InpatientError, LoadError, LabelDerivationError, PartitionError, \
    EncodingError, FitError, ScoringError, SelectionError, ConfigError
from .config import load_config
from .data import load_claims, derive_long_stay, label_claims, summarize_claims
from .split import Partition, stratified_split, partition
from .column_transformer import build_domain
from .one_hot import LabelEncoder, OrdinalEncoder, OneHotEncoder
from .classifiers import Variant, DistinctRowsClassifier, make_variants
from .metrics import Evaluation, confusion_table, misclassification_rate, score_model
from .harness import fit_variant, predict_variant, evaluate_variants, select_variant
from .pipeline import PipelineResult, find_unseen, run_pipeline, print_report
from .variables import cat_var, label_var, los_var, variant_order

__version__ = '0.1.0'
