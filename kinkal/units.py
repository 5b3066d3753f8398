"""System of units and physical constants.

Basic units: millimeter, nanosecond, MeV, positron charge, kelvin, mole,
candela, radian and steradian.  Every other unit is derived from these.
"""

# Mathematical constants
pi = 3.14159265358979323846
twopi = 2 * pi
halfpi = pi / 2
pi2 = pi * pi

# Length [L]
millimeter = 1.0
millimeter2 = millimeter * millimeter
millimeter3 = millimeter * millimeter * millimeter

centimeter = 10.0 * millimeter
centimeter2 = centimeter * centimeter
centimeter3 = centimeter * centimeter * centimeter

meter = 1000.0 * millimeter
meter2 = meter * meter
meter3 = meter * meter * meter

kilometer = 1000.0 * meter
kilometer2 = kilometer * kilometer
kilometer3 = kilometer * kilometer * kilometer

parsec = 3.0856775807e16 * meter

micrometer = 1.0e-6 * meter
nanometer = 1.0e-9 * meter
angstrom = 1.0e-10 * meter
fermi = 1.0e-15 * meter

barn = 1.0e-28 * meter2
millibarn = 1.0e-3 * barn
microbarn = 1.0e-6 * barn
nanobarn = 1.0e-9 * barn
picobarn = 1.0e-12 * barn

nm = nanometer
um = micrometer

mm = millimeter
mm2 = millimeter2
mm3 = millimeter3

cm = centimeter
cm2 = centimeter2
cm3 = centimeter3

liter = 1.0e3 * cm3
L = liter
dL = 1.0e-1 * liter
cL = 1.0e-2 * liter
mL = 1.0e-3 * liter

m = meter
m2 = meter2
m3 = meter3

km = kilometer
km2 = kilometer2
km3 = kilometer3

pc = parsec

# Angle
radian = 1.0
milliradian = 1.0e-3 * radian
degree = (pi / 180.0) * radian

steradian = 1.0

rad = radian
mrad = milliradian
sr = steradian
deg = degree

# Time [T]
nanosecond = 1.0
second = 1.0e9 * nanosecond
millisecond = 1.0e-3 * second
microsecond = 1.0e-6 * second
picosecond = 1.0e-12 * second

hertz = 1.0 / second
kilohertz = 1.0e3 * hertz
megahertz = 1.0e6 * hertz

ns = nanosecond
s = second
ms = millisecond
us = microsecond
ps = picosecond

# Electric charge [Q]
eplus = 1.0
e_SI = 1.602176487e-19
coulomb = eplus / e_SI

# Energy [E]
megaelectronvolt = 1.0
electronvolt = 1.0e-6 * megaelectronvolt
kiloelectronvolt = 1.0e-3 * megaelectronvolt
gigaelectronvolt = 1.0e3 * megaelectronvolt
teraelectronvolt = 1.0e6 * megaelectronvolt
petaelectronvolt = 1.0e9 * megaelectronvolt

joule = electronvolt / e_SI

MeV = megaelectronvolt
eV = electronvolt
keV = kiloelectronvolt
GeV = gigaelectronvolt
TeV = teraelectronvolt
PeV = petaelectronvolt

# Mass [E][T^2][L^-2]
kilogram = joule * second * second / (meter * meter)
gram = 1.0e-3 * kilogram
milligram = 1.0e-3 * gram

kg = kilogram
g = gram
mg = milligram

# Power [E][T^-1]
watt = joule / second

# Force [E][L^-1]
newton = joule / meter

# Pressure [E][L^-3]
hep_pascal = newton / m2
pascal = hep_pascal
bar = 100000 * pascal
atmosphere = 101325 * pascal

# Electric current [Q][T^-1]
ampere = coulomb / second
milliampere = 1.0e-3 * ampere
microampere = 1.0e-6 * ampere
nanoampere = 1.0e-9 * ampere

# Electric potential [E][Q^-1]
megavolt = megaelectronvolt / eplus
kilovolt = 1.0e-3 * megavolt
volt = 1.0e-6 * megavolt

# Electric resistance [E][T][Q^-2]
ohm = volt / ampere

# Electric capacitance [Q^2][E^-1]
farad = coulomb / volt
millifarad = 1.0e-3 * farad
microfarad = 1.0e-6 * farad
nanofarad = 1.0e-9 * farad
picofarad = 1.0e-12 * farad

# Magnetic flux [T][E][Q^-1]
weber = volt * second

# Magnetic field [T][E][Q^-1][L^-2]
tesla = volt * second / meter2
gauss = 1.0e-4 * tesla
kilogauss = 1.0e-1 * tesla

# Inductance [T^2][E][Q^-2]
henry = weber / ampere

# Temperature
kelvin = 1.0

# Amount of substance
mole = 1.0

# Activity [T^-1]
becquerel = 1.0 / second
curie = 3.7e10 * becquerel
kilobecquerel = 1.0e3 * becquerel
megabecquerel = 1.0e6 * becquerel
gigabecquerel = 1.0e9 * becquerel
millicurie = 1.0e-3 * curie
microcurie = 1.0e-6 * curie
Bq = becquerel
kBq = kilobecquerel
MBq = megabecquerel
GBq = gigabecquerel
Ci = curie
mCi = millicurie
uCi = microcurie

# Absorbed dose [L^2][T^-2]
gray = joule / kilogram
kilogray = 1.0e3 * gray
milligray = 1.0e-3 * gray
microgray = 1.0e-6 * gray

# Luminous intensity [I]
candela = 1.0

# Luminous flux [I]
lumen = candela * steradian

# Illuminance [I][L^-2]
lux = lumen / meter2

# Miscellaneous
perCent = 0.01
perThousand = 0.001
perMillion = 0.000001

# Physical constants
Avogadro = 6.02214179e23 / mole

c_light = 2.99792458e8 * m / s
c_squared = c_light * c_light

h_Planck = 6.62606896e-34 * joule * s
hbar_Planck = h_Planck / twopi
hbarc = hbar_Planck * c_light
hbarc_squared = hbarc * hbarc

electron_charge = -eplus
e_squared = eplus * eplus

electron_mass_c2 = 0.510998910 * MeV
proton_mass_c2 = 938.272013 * MeV
neutron_mass_c2 = 939.56536 * MeV
amu_c2 = 931.494028 * MeV
amu = amu_c2 / c_squared

mu0 = 4 * pi * 1.0e-7 * henry / m
epsilon0 = 1.0 / (c_squared * mu0)

elm_coupling = e_squared / (4 * pi * epsilon0)
fine_structure_const = elm_coupling / hbarc
classic_electr_radius = elm_coupling / electron_mass_c2
electron_Compton_length = hbarc / electron_mass_c2
Bohr_radius = electron_Compton_length / fine_structure_const

alpha_rcl2 = fine_structure_const * classic_electr_radius * classic_electr_radius

twopi_mc2_rcl2 = twopi * electron_mass_c2 * classic_electr_radius * classic_electr_radius

k_Boltzmann = 8.617343e-11 * MeV / kelvin

STP_Temperature = 273.15 * kelvin
STP_Pressure = 1.0 * atmosphere
kGasThreshold = 10.0 * mg / cm3

universe_mean_density = 1.0e-25 * g / cm3