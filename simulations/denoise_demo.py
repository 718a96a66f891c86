"""
Denoise Demo: Classify and Cancel Each Noise Archetype

Synthesizes one clip per archetype (or loads a WAV file), classifies it,
runs label-driven LMS noise cancellation and reports the result.

Usage:
    python simulations/denoise_demo.py                 # all archetypes
    python simulations/denoise_demo.py input.wav       # a real recording

Output: output/audio/*.wav, output/plots/denoise_*.png
"""

import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from whisperwave import AudioBuffer, NoiseClassifier, NoiseCanceller, load_wav
from whisperwave.classifier import confidence_level, is_confident, print_params_table
from whisperwave.config import DEFAULT_SAMPLE_RATE, OUTPUT_DIR
from whisperwave.noise import ArchetypeNoiseGenerator
from whisperwave.utils import generate_metrics_report, save_comparison_wav


DURATION = 2.0
SEED = 42


def plot_before_after(name: str, original: AudioBuffer, processed: AudioBuffer, label: str) -> Path:
    """Plot the first 50 ms of channel 0 before and after processing."""
    show_samples = min(original.length, int(0.05 * original.sample_rate))
    t_ms = np.arange(show_samples) / original.sample_rate * 1000

    fig, ax = plt.subplots(figsize=(8, 4))
    ax.plot(t_ms, original.channel(0)[:show_samples], 'r-', linewidth=1.0, alpha=0.8, label='Input')
    ax.plot(t_ms, processed.channel(0)[:show_samples], 'g-', linewidth=1.0, alpha=0.8, label='Processed')
    ax.set_xlabel('Time (ms)')
    ax.set_ylabel('Amplitude')
    ax.set_title(f"{name}: classified as {label}")
    ax.legend(loc='upper right')
    ax.grid(True, alpha=0.3)
    plt.tight_layout()

    plot_dir = OUTPUT_DIR / 'plots'
    plot_dir.mkdir(parents=True, exist_ok=True)
    path = plot_dir / f"denoise_{name.lower().replace('/', '_')}.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path


def run_one(name: str, buffer: AudioBuffer, classifier: NoiseClassifier):
    print(f"\n{name}")
    print("-" * 50)

    result = classifier.classify(buffer)
    for archetype, score in result.scores.items():
        marker = '*' if archetype == result.label else ' '
        print(f"  {marker} {archetype:<14} {score:.2f} ({confidence_level(score)})")

    if not is_confident(result):
        print("  Unable to classify noise type with confidence; using default parameters")
        label = ''
    else:
        label = result.label

    canceller = NoiseCanceller(label)
    report = canceller.process_with_report(
        buffer,
        progress_callback=lambda done, total: print(f"\r  Channels: {done}/{total}", end=""),
    )
    print()
    print(generate_metrics_report(buffer, report.output, noise_type=result.label))

    prefix = name.lower().replace('/', '_')
    save_comparison_wav(prefix, buffer, report.output, output_dir=OUTPUT_DIR / 'audio')
    plot_path = plot_before_after(name, buffer, report.output, result.label)
    print(f"  Saved plot: {plot_path}")


def main():
    classifier = NoiseClassifier(seed=SEED)
    print_params_table()

    if len(sys.argv) > 1:
        path = Path(sys.argv[1])
        run_one(path.stem, load_wav(path), classifier)
        return

    generator = ArchetypeNoiseGenerator(DEFAULT_SAMPLE_RATE, seed=SEED)
    for name, signal in generator.generate_all(DURATION).items():
        run_one(name, AudioBuffer.mono(signal, DEFAULT_SAMPLE_RATE), classifier)


if __name__ == '__main__':
    main()
