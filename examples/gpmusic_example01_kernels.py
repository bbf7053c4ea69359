'''Shapes of the three covariance functions

Plots k(0, h) for the RBF, rational quadratic and periodic kernels,
and one prior sample path of each on a grid of 16th notes.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
----
'''
import numpy as np
import gpmusic as gm
import gpmusic.misc.plotutils as plotutils


def main(show=True):
    kernels = {
        "RBF": gm.kernel.RBF(length_scale=1.0, variance=1.0),
        "RationalQuadratic": gm.kernel.RationalQuadratic(length_scale=1.0, alpha=0.5),
        "Periodic": gm.kernel.Periodic(length_scale=1.0, periodicity=2.0),
    }

    h = np.linspace(0.0, 6.0, 200)
    fig = plotutils.Figure()
    for name, k in kernels.items():
        fig.plot(h, k.call([[0.0]], h).get_row(0), label=name)
    fig.xylabels("h", "k(0, h)")
    fig.title("Covariance functions")
    if show:
        fig.show(grid=True, legend=True)

    # one bar of 16th notes, in beats
    xt = np.arange(0, 4, 0.25)
    fig = plotutils.Figure()
    for i, (name, k) in enumerate(kernels.items()):
        zsim = gm.core.sample_paths(k, xt, 1, rng=i, jitter=1e-6)
        fig.plot(xt, zsim[0], "o-", label=name)
    fig.xylabels("beat", "value")
    fig.title("Prior sample paths")
    if show:
        fig.show(grid=True, legend=True)
    return kernels


if __name__ == "__main__":
    main()
