'''Posterior melodies

Conditional sample paths of a GP fitted to a few anchor notes. Each
path is a melody passing (almost) through the anchors; the kernel
decides how it moves in between. Samples are rounded to the nearest
semitone for playback.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
----
'''
import numpy as np
import gpmusic as gm
import gpmusic.misc.plotutils as plotutils


def main(show=True, n_samples=4, seed=2024):
    # anchors: beat -> MIDI pitch
    xi = np.array([0.0, 2.0, 4.0, 6.0, 8.0])
    zi = np.array([60.0, 64.0, 67.0, 65.0, 60.0])
    xt = np.arange(0.0, 8.25, 0.5)

    kernel = gm.kernel.RationalQuadratic(length_scale=1.5, alpha=1.0, variance=9.0)
    gp = gm.GaussianProcessRegressor(kernel, alpha=1e-4).fit(xi, zi)

    rng = np.random.default_rng(seed)
    zsim = gp.sample_y(xt, n_samples=n_samples, rng=rng)
    melodies = np.rint(zsim).astype(int)
    for i, m in enumerate(melodies):
        print("melody {}: {}".format(i, " ".join(str(p) for p in m)))

    zpm, zpstd = gp.predict(xt, return_std=True)
    fig = plotutils.Figure()
    fig.plotgp(xt, zpm, zpstd, colorscheme="simple")
    fig.plotsamples(xt, zsim)
    fig.plotdata(xi, zi)
    fig.xylabels("beat", "MIDI pitch")
    fig.title("Posterior melodies")
    if show:
        fig.show(grid=True, legend=True)
    return melodies


if __name__ == "__main__":
    main()
