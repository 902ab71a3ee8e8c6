import numpy as np
import matplotlib.pyplot as plt
from pyradlen.io.composition import CompositionTable
from pyradlen.physics.radiation_length import (
    mono_nucleus_radiation_length,
    contributions,
    plot_contributions,
)

# Plastic scintillator made of H, C and O (mass fractions 30%, 60%, 10%)
plastic = CompositionTable({(1, 1.008): 0.30, (6, 12.012): 0.60, (8, 16.002): 0.10}, name="plastic")
print(plastic)
print(f"X0 = {plastic.radiation_length():.4f} g/cm2")

# Per-element breakdown of 1/X0
print(contributions(plastic).to_string(index=False))
plot_contributions(plastic, label="Plastic scintillator", show=False)

# Radiation length of every element up to uranium, with a crude A ~ 2.5 Z
z = np.arange(1, 93)
x0 = mono_nucleus_radiation_length(z, 2.5 * z)

plt.figure()
plt.plot(z, x0, marker="o", markersize=3)
plt.yscale("log")
plt.xlabel("Atomic number Z")
plt.ylabel("X₀ [g/cm²]")
plt.title("Radiation length vs Z (A = 2.5 Z)")
plt.grid(True)
plt.tight_layout()
plt.show()
