'''GP regression through a short melody

A GP with an RBF covariance is fitted to five MIDI pitches placed on
beats 0..4 and predicted on a fine grid, with coverage intervals.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
----
'''
import numpy as np
import gpmusic as gm
import gpmusic.misc.plotutils as plotutils

## -- dataset


def generate_data():
    '''
    (xi, zi): beats and MIDI pitches of the melody
    xt: prediction grid
    '''
    xi = np.array([[0.0], [1.0], [2.0], [3.0], [4.0]])
    zi = np.array([60.0, 62.0, 64.0, 65.0, 67.0])
    xt = np.linspace(-1.0, 5.0, 241).reshape(-1, 1)
    return xi, zi, xt


def main(show=True):
    xi, zi, xt = generate_data()

    ## -- model specification
    kernel = gm.kernel.RBF(length_scale=1.0, variance=1.0)
    gp = gm.GaussianProcessRegressor(kernel, alpha=1e-6)
    gp.fit(xi, zi)
    print(gp)
    print("log marginal likelihood: {:.3f}".format(gp.log_marginal_likelihood()))

    ## -- prediction
    zpm, zpstd = gp.predict(xt, return_std=True)

    ## -- visualization
    fig = plotutils.Figure()
    fig.plotgp(xt, zpm, zpstd)
    fig.plotdata(xi, zi)
    fig.xylabels("beat", "MIDI pitch")
    fig.title("Posterior mean and coverage intervals")
    if show:
        fig.show(grid=True, legend=True)
    return zpm, zpstd


if __name__ == "__main__":
    main()
