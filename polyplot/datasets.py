"""
Reference datasets for polyplot examples.

Monthly average of the daily maximum temperature (Celsius) and household
ice cream/sorbet spending (Yen), ten years of paired monthly values.
"""

import numpy as np

# Four hand-picked points for the straight-line example
SIMPLE = (
    (1.0, 3.0),
    (3.0, 6.0),
    (6.0, 5.0),
    (8.0, 7.0),
)

# Monthly avg of max temperature (Celsius)
TEMPERATURES = np.array([
    9.1, 11.2, 12.3, 18.9, 22.2, 26.0, 30.9, 31.2, 28.8, 23.0, 18.3, 11.1,
    8.3, 9.1, 12.5, 18.5, 23.6, 24.8, 30.1, 33.1, 29.8, 23.0, 16.3, 11.2,
    9.6, 10.3, 16.4, 19.2, 24.1, 26.5, 31.4, 33.2, 28.8, 23.0, 17.4, 12.1,
    10.6, 9.8, 14.5, 19.6, 24.7, 26.9, 30.5, 31.2, 26.9, 23.0, 17.4, 11.0,
    10.4, 10.4, 15.5, 19.3, 26.4, 26.4, 30.1, 30.5, 26.4, 22.7, 17.8, 13.4,
    10.6, 12.2, 14.9, 20.3, 25.2, 26.3, 29.7, 31.6, 27.7, 22.6, 15.5, 13.8,
    10.8, 12.1, 13.4, 19.9, 25.1, 26.4, 31.8, 30.4, 26.8, 20.1, 16.6, 11.1,
    9.4, 10.1, 16.9, 22.1, 24.6, 26.6, 32.7, 32.5, 26.6, 23.0, 17.7, 12.1,
    10.3, 11.6, 15.4, 19.0, 25.3, 25.8, 27.5, 32.8, 29.4, 23.3, 17.7, 12.6,
    11.1, 13.3, 16.0, 18.2, 24.0, 27.5, 27.7, 34.1, 28.1, 21.4, 18.6, 12.3,
])

# Ice cream/sorbet spending (Yen), same months as TEMPERATURES
SPENDINGS = np.array([
    463.0, 360.0, 380.0, 584.0, 763.0, 886.0, 1168.0, 1325.0, 847.0, 542.0, 441.0, 499.0,
    363.0, 327.0, 414.0, 545.0, 726.0, 847.0, 1122.0, 1355.0, 916.0, 571.0, 377.0, 465.0,
    377.0, 362.0, 518.0, 683.0, 838.0, 1012.0, 1267.0, 1464.0, 1000.0, 629.0, 448.0, 466.0,
    404.0, 343.0, 493.0, 575.0, 921.0, 1019.0, 1149.0, 1303.0, 805.0, 739.0, 587.0, 561.0,
    486.0, 470.0, 564.0, 609.0, 899.0, 946.0, 1295.0, 1325.0, 760.0, 667.0, 564.0, 633.0,
    478.0, 450.0, 567.0, 611.0, 947.0, 962.0, 1309.0, 1307.0, 930.0, 668.0, 496.0, 650.0,
    506.0, 423.0, 531.0, 672.0, 871.0, 986.0, 1368.0, 1319.0, 924.0, 716.0, 651.0, 708.0,
    609.0, 535.0, 717.0, 890.0, 1054.0, 1077.0, 1425.0, 1378.0, 900.0, 725.0, 554.0, 542.0,
    561.0, 459.0, 604.0, 745.0, 1105.0, 973.0, 1263.0, 1533.0, 1044.0, 821.0, 621.0, 601.0,
    549.0, 572.0, 711.0, 819.0, 1141.0, 1350.0, 1285.0, 1643.0, 1133.0, 784.0, 682.0, 587.0,
])
