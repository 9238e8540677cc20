import argparse, sys
from loguru import logger

from .charts import ConstellationChart, SignalChart
from .engine import SignalGenerator
from .errors import InvalidParameter
from .generators import DEFAULT_DURATION, DEFAULT_SAMPLE_RATE
from .iq import quadrature_mix


def build_parser():
    p = argparse.ArgumentParser(prog="sinegen", description="Sine, AM and FM signal generator")
    p.add_argument("-o", "--outfile", required=True, help="Signal chart image")
    p.add_argument("--iq-out", help="Constellation chart image")
    p.add_argument("-d", "--duration", type=float, default=DEFAULT_DURATION)
    p.add_argument("-r", "--sample-rate", type=int, default=DEFAULT_SAMPLE_RATE)
    p.add_argument("-v", "--verbose", action="store_true")
    sub = p.add_subparsers(dest="kind", required=True)

    sine = sub.add_parser("sine", help="Pure sine wave")
    sine.add_argument("--amp", type=float, default=1.0)
    sine.add_argument("--freq", type=float, default=5.0)
    sine.add_argument("--phase", type=float, default=0.0, help="radians")

    am = sub.add_parser("am", help="Amplitude modulated sine")
    am.add_argument("--amp", type=float, default=1.0)
    am.add_argument("--freq", type=float, default=20.0)
    am.add_argument("--message-amp", type=float, default=0.5)
    am.add_argument("--message-freq", type=float, default=2.0)

    fm = sub.add_parser("fm", help="Frequency modulated sine")
    fm.add_argument("--amp", type=float, default=1.0)
    fm.add_argument("--freq", type=float, default=20.0)
    fm.add_argument("--index", type=float, default=5.0, help="modulation index (beta)")
    fm.add_argument("--message-freq", type=float, default=2.0)
    return p


def setup_logging(verbose: bool):
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def generate(gen: SignalGenerator, args):
    if args.kind == "sine":
        return gen.generate_sine(args.amp, args.freq, args.phase, args.duration, args.sample_rate)
    if args.kind == "am":
        return gen.generate_amplitude_modulated(args.amp, args.freq, args.message_amp, args.message_freq,
                                                args.duration, args.sample_rate)
    return gen.generate_frequency_modulated(args.amp, args.freq, args.index, args.message_freq,
                                            args.duration, args.sample_rate)


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)
    setup_logging(args.verbose)

    gen = SignalGenerator()
    try:
        signal = generate(gen, args)
        time = gen.generate_time_array(args.duration, args.sample_rate)
    except InvalidParameter as e:
        p.error(str(e))

    if len(signal) == 0:
        print("No samples generated.")
        return 1

    chart = SignalChart()
    try:
        if not chart.update(time, signal, args.kind) or not chart.save(args.outfile):
            return 1
    finally:
        chart.dispose()
    print(f"Wrote {len(signal)} samples ({args.duration:.2f}s @ {args.sample_rate}Hz) to {args.outfile}")

    if args.iq_out:
        iq = ConstellationChart()
        try:
            i, q = quadrature_mix(signal, time, args.freq)
            if not iq.update(i, q) or not iq.save(args.iq_out):
                return 1
        finally:
            iq.dispose()
        print(f"Wrote constellation to {args.iq_out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
