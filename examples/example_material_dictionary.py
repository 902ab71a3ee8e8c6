from pyradlen.io.materials import MaterialDictionary
from pyradlen.request import RadiationLengthRequest

# Print every predefined material with its radiation length
materials = MaterialDictionary()
materials.display()

# Scintillating crystals sorted by radiation length in cm
df = materials.to_dataframe()
crystals = df[df["name"].isin(["pbwo4", "bgo", "csi", "nai"])]
print(crystals.sort_values("radiation_length_cm").to_string(index=False))

# Same computation through a request, overriding the density
request = RadiationLengthRequest.from_dict({"material": "liquid_argon", "density": 1.40})
print(request.compute().summary())
