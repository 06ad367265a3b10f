import argparse
import logging
import sys

from inpatient import InpatientError, load_config, print_report, run_pipeline

logger = logging.getLogger('inpatient')


def build_parser():
    parser = argparse.ArgumentParser(description='Compare long-stay classifiers on inpatient claims.')
    parser.add_argument('input', type=str, help='inpatient claims CSV')
    parser.add_argument('--config', type=str, default='model_param.yaml')
    parser.add_argument('--plot', type=str, default='naive_bayes.png', help='naive bayes plot output')
    parser.add_argument('--n-jobs', type=int, default=1, help='fit variants in parallel')
    parser.add_argument('--verbose', action='store_true')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    try:
        config = load_config(args.config)
        result = run_pipeline(args.input, config, plot_path=args.plot, n_jobs=args.n_jobs)
    except InpatientError as e:
        logger.error('%s: %s', type(e).__name__, e)
        return 1

    print_report(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
