import rocketdrag as rd

'''OpenRocket simulation with no airbrake deployment, and CFD samples of the fully deployed airbrakes'''
FLIGHT_FILE = 'rocketdrag/tests/testflight.csv'     #Use e.g. 'sim-(F26FJ-6)-304m.xlsx' with the 'raw-data' sheet for a workbook export
SAMPLE_FILE = 'rocketdrag/tests/vel-drag_sample.csv'

'''Fit C_f to the CFD data'''
fit = rd.fit_cfd_data(SAMPLE_FILE, degree=2, plot=False)
print("C_f = {}, R^2 = {:.4f}".format(fit.coefficients.tolist(), fit.r2))
rd.plot_samples(rd.load_samples(SAMPLE_FILE), show=False)
rd.plot_fit(rd.load_samples(SAMPLE_FILE), fit)

'''Try out some coefficients against the simulation, between burnout and apogee'''
config = rd.DragConfig(C_f=[0, 0.01, 0.0005])
drag_series = rd.compare_drag_model(FLIGHT_FILE, config, debug=True)

#Changing the coefficients is just running it again
config = config.updated(C_f=[0, 0, 0.001], window_start=3.0)
drag_series = rd.compare_drag_model(FLIGHT_FILE, config, debug=True)
