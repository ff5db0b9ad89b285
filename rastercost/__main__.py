import argparse
import os

from rastercost.image.aggregator import StatisticsAggregator, DEFAULT_CHANNELS
from rastercost.utils import imread, file_size


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Estimate the zero-order entropy coded size of an image under several predictors")
    parser.add_argument('image', help='Path to the image file')
    parser.add_argument('--reference-size', type=int, default=None,
                        help='Compressed size to compare against, defaults to the file size of the image')
    parser.add_argument('--channels', nargs='+', choices=DEFAULT_CHANNELS, default=list(DEFAULT_CHANNELS),
                        help='RGBA planes to analyse, in the order given')
    parser.add_argument('--plot', metavar='DIR', default=None,
                        help='Write one histogram PNG per channel and frequency map into DIR')
    parser.add_argument('--y-max', type=int, default=20000, help='Upper limit of the histogram y axis')
    parser.add_argument('--per-channel', action='store_true', help='Also print the per channel results')
    parser.add_argument('--verbose', action='store_true', help='Print progress while processing')
    args = parser.parse_args(argv)
    if not os.path.isfile(args.image):
        parser.error(f"Unable to load “{args.image}”")
    if len(set(args.channels)) != len(args.channels):
        parser.error("Each channel can only be selected once")
    return args


def main(argv=None):
    args = parse_args(argv)

    planes = [DEFAULT_CHANNELS.index(name) for name in args.channels]
    image = imread(args.image)[:, :, planes]
    reference_size = args.reference_size if args.reference_size is not None else file_size(args.image)

    aggregator = StatisticsAggregator(channel_names=args.channels, verbose=args.verbose)
    report = aggregator.run(image, reference_size=reference_size)

    if args.per_channel:
        for name in args.channels:
            for line in report.channel_lines(name):
                print(line)
    for line in report.summary_lines():
        print(line)
    print(f"Best strategy: {report.best_strategy()}")

    if args.plot:
        from rastercost.utils.plot import save_histograms
        paths = save_histograms(report, args.plot, y_max=args.y_max)
        print(f"Wrote {len(paths)} histograms to {args.plot}")
    return report


if __name__ == "__main__":
    main()
