'''Kernel random walks

Smooth velocity curves from `KernelGenerator`, with increasing length
scales, and a walk around an existing phrase.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
----
'''
import numpy as np
import gpmusic as gm
import gpmusic.misc.plotutils as plotutils


def to_velocity(walk, low=40, high=110):
    '''Map a walk to MIDI velocities in [low, high].'''
    span = np.ptp(walk)
    if span == 0.0:
        return np.full(walk.shape, (low + high) // 2, dtype=int)
    u = (walk - walk.min()) / span
    return np.rint(low + u * (high - low)).astype(int)


def main(show=True):
    length = 64
    generator = gm.KernelGenerator(amplitude=1.0, noise_level=0.01)

    fig = plotutils.Figure(nrows=2)
    for i, length_scale in enumerate([1.0, 4.0, 12.0]):
        walk = generator.generate(length=length, length_scale=length_scale, rng=i)
        fig.plot(np.arange(length), to_velocity(walk), label="length scale {}".format(length_scale))
    fig.xylabels("step", "velocity")

    phrase = [60, 62, 64, 65, 67, 65, 64, 62]
    around = gm.KernelGenerator(data=phrase, length_scale=2.0, walk_around=True)
    walk = around.generate(length=len(phrase), rng=7)
    fig.subplot(2)
    fig.plot(np.arange(len(phrase)), phrase, "rs", label="phrase")
    fig.plot(np.arange(len(phrase)), walk, "o-", label="walk around")
    fig.xylabels("step", "MIDI pitch")
    if show:
        fig.show(grid=True, legend=True)
    return walk


if __name__ == "__main__":
    main()
